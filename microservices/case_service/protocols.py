"""
Case Service Protocols

Defines interfaces for dependency injection and testing.
"""

from typing import AsyncIterator, Iterable, Protocol

from core.ledger import ChaincodeStubProtocol
from core.ledger.errors import (
    AuthorizationDeniedError,
    LedgerStorageError,
    RecordAlreadyExistsError,
    RecordNotFoundError,
    RecordSerializationError,
)

from .models import CaseRecord


class CaseRepositoryProtocol(Protocol):
    """Protocol for FIR case records on the ledger"""

    async def exists(self, stub: ChaincodeStubProtocol, key: str) -> bool:
        ...

    async def read(self, stub: ChaincodeStubProtocol, key: str) -> CaseRecord:
        ...

    async def create(self, stub: ChaincodeStubProtocol, record: CaseRecord) -> None:
        ...

    async def update(self, stub: ChaincodeStubProtocol, record: CaseRecord) -> None:
        ...

    async def delete(self, stub: ChaincodeStubProtocol, key: str) -> None:
        ...

    async def seed(
        self,
        stub: ChaincodeStubProtocol,
        records: Iterable[CaseRecord],
        overwrite: bool = False,
    ) -> int:
        ...

    def scan_all(self, stub: ChaincodeStubProtocol) -> AsyncIterator[CaseRecord]:
        ...


__all__ = [
    "CaseRepositoryProtocol",
    "AuthorizationDeniedError",
    "LedgerStorageError",
    "RecordAlreadyExistsError",
    "RecordNotFoundError",
    "RecordSerializationError",
]
