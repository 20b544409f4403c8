"""
Contract Base and Transaction Dispatch

A contract is a class whose transaction functions are registered with the
@transaction decorator. An inbound invocation names a function and carries a
list of string arguments; Contract.invoke resolves the name, checks the
argument count, runs the function and encodes its result as JSON bytes.

The decorator also applies the authorization gate, so a function is gated
the same way whether it is reached through invoke() or called directly.

Usage:
    class PersonnelContract(Contract):
        contract_name = "personnel"

        @transaction("readPersonnel", "ReadPolicePersonnel")
        async def read_personnel(self, ctx, officer_id):
            ...

    result = await contract.invoke(ctx, "readPersonnel", ["POL12345"])
"""

import functools
import inspect
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, ClassVar, Dict, List, Sequence, Tuple

from .access_policy import AuthorizationGate
from .errors import InvalidArgumentsError, UnknownTransactionError
from .identity import ClientIdentityProtocol
from .record_engine import LedgerRecord
from .stub import ChaincodeStubProtocol

logger = logging.getLogger(__name__)


@dataclass
class TransactionContext:
    """Everything a transaction function may touch"""
    stub: ChaincodeStubProtocol
    client_identity: ClientIdentityProtocol


@dataclass(frozen=True)
class TransactionSpec:
    """Registration data of one transaction function"""
    name: str
    attribute: str
    parameters: Tuple[str, ...]
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def arity(self) -> int:
        return len(self.parameters)


def transaction(name: str, *aliases: str) -> Callable:
    """Register an async contract method as transaction function `name`"""

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"transaction {name} must be an async function")

        # Drop self and ctx
        parameters = tuple(inspect.signature(func).parameters)[2:]

        @functools.wraps(func)
        async def wrapper(self: "Contract", ctx: TransactionContext, *args: str) -> Any:
            self.gate.enforce(ctx.client_identity, name)
            return await func(self, ctx, *args)

        wrapper.__transaction__ = TransactionSpec(
            name=name,
            attribute=func.__name__,
            parameters=parameters,
            aliases=tuple(aliases),
        )
        return wrapper

    return decorator


def encode_result(result: Any) -> bytes:
    """Encode a transaction return value as JSON bytes; None encodes as empty"""
    if result is None:
        return b""
    if isinstance(result, LedgerRecord):
        return result.model_dump_json(by_alias=True).encode("utf-8")
    if isinstance(result, (list, tuple)):
        items = [
            item.model_dump(by_alias=True) if isinstance(item, LedgerRecord) else item
            for item in result
        ]
        return json.dumps(items).encode("utf-8")
    return json.dumps(result).encode("utf-8")


def decode_result(raw: bytes) -> Any:
    """Inverse of encode_result for callers of the runner"""
    if not raw:
        return None
    return json.loads(raw)


class Contract:
    """Base class for ledger contracts"""

    contract_name: ClassVar[str] = ""
    _transactions: ClassVar[Dict[str, TransactionSpec]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        registry: Dict[str, TransactionSpec] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                spec = getattr(value, "__transaction__", None)
                if spec is None:
                    continue
                for function_name in (spec.name, *spec.aliases):
                    registry[function_name] = spec
        cls._transactions = registry

    def __init__(self, gate: AuthorizationGate):
        self.gate = gate

    def transaction_names(self) -> List[str]:
        """Canonical transaction names, without aliases"""
        return sorted({spec.name for spec in self._transactions.values()})

    def get_transaction(self, function_name: str) -> TransactionSpec:
        spec = self._transactions.get(function_name)
        if spec is None:
            raise UnknownTransactionError(
                f"function {function_name} not found in contract {self.contract_name}"
            )
        return spec

    async def invoke(
        self,
        ctx: TransactionContext,
        function_name: str,
        args: Sequence[str] = (),
    ) -> bytes:
        """Run one named transaction with string arguments"""
        spec = self.get_transaction(function_name)

        if len(args) != spec.arity:
            raise InvalidArgumentsError(
                f"incorrect number of params for {spec.name}: "
                f"expected {spec.arity}, received {len(args)}",
                expected=spec.arity,
                received=len(args),
            )
        for position, value in enumerate(args):
            if not isinstance(value, str):
                raise InvalidArgumentsError(
                    f"argument {spec.parameters[position]} of {spec.name} must be a string",
                    expected=spec.arity,
                    received=len(args),
                )

        logger.debug(f"Invoking {self.contract_name}.{spec.name} [{ctx.stub.tx_id}]")
        method = getattr(self, spec.attribute)
        result = await method(ctx, *args)
        return encode_result(result)


__all__ = [
    "TransactionContext",
    "TransactionSpec",
    "transaction",
    "encode_result",
    "decode_result",
    "Contract",
]
