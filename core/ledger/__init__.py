"""
Ledger contract runtime shared by the record services.

COMPONENTS:
    - stub.py: state access protocol, range iterator, in-memory world state
    - identity.py: caller identity (MSP ID)
    - access_policy.py: authorization gate and per-operation policy table
    - record_engine.py: generic record CRUD and enumeration
    - contract.py: contract base class and transaction dispatch
    - runner.py: submit / evaluate with all-or-nothing commit
    - errors.py: error taxonomy
"""

from .access_policy import AccessDecision, AccessPolicy, AuthorizationGate, PolicyProfile
from .contract import Contract, TransactionContext, decode_result, encode_result, transaction
from .errors import (
    http_status_for,
    AuthorizationDeniedError,
    IdentityUnavailableError,
    InvalidArgumentsError,
    LedgerContractError,
    LedgerStorageError,
    RecordAlreadyExistsError,
    RecordNotFoundError,
    RecordSerializationError,
    UnknownTransactionError,
)
from .identity import ClientIdentity, ClientIdentityProtocol
from .record_engine import LedgerRecord, RecordEngine
from .runner import ContractRunner
from .stub import (
    ChaincodeStubProtocol,
    InMemoryLedger,
    StateEntry,
    StateQueryIterator,
    TransactionStub,
    get_ledger,
)

__all__ = [
    "AccessDecision",
    "AccessPolicy",
    "AuthorizationGate",
    "PolicyProfile",
    "Contract",
    "TransactionContext",
    "encode_result",
    "decode_result",
    "transaction",
    "http_status_for",
    "AuthorizationDeniedError",
    "IdentityUnavailableError",
    "InvalidArgumentsError",
    "LedgerContractError",
    "LedgerStorageError",
    "RecordAlreadyExistsError",
    "RecordNotFoundError",
    "RecordSerializationError",
    "UnknownTransactionError",
    "ClientIdentity",
    "ClientIdentityProtocol",
    "LedgerRecord",
    "RecordEngine",
    "ContractRunner",
    "ChaincodeStubProtocol",
    "InMemoryLedger",
    "StateEntry",
    "StateQueryIterator",
    "TransactionStub",
    "get_ledger",
]
