"""
Record CRUD Engine

Create / read / update / delete / exists / scan for one record kind, stored as
JSON under a single primary key. Every state call goes through the stub of the
running invocation; the engine itself keeps no state between invocations.
"""

import logging
from typing import AsyncIterator, ClassVar, Generic, Iterable, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import (
    LedgerContractError,
    LedgerStorageError,
    RecordAlreadyExistsError,
    RecordNotFoundError,
    RecordSerializationError,
)
from .stub import ChaincodeStubProtocol

logger = logging.getLogger(__name__)

# Separates the kind namespace from the primary key
NAMESPACE_SEPARATOR = "\x00"


class LedgerRecord(BaseModel):
    """Base for flat, string-field ledger records"""

    model_config = ConfigDict(populate_by_name=True)

    KEY_FIELD: ClassVar[str] = ""
    KIND: ClassVar[str] = "record"

    @property
    def primary_key(self) -> str:
        return getattr(self, self.KEY_FIELD)

    def with_key(self, key: str) -> "LedgerRecord":
        return self.model_copy(update={self.KEY_FIELD: key})


RecordT = TypeVar("RecordT", bound=LedgerRecord)


class RecordEngine(Generic[RecordT]):
    """Generic CRUD over one record kind"""

    def __init__(self, record_type: Type[RecordT], namespace: str, namespacing: bool = True):
        self.record_type = record_type
        self.namespace = namespace
        self.namespacing = namespacing

    # ====================
    # Keys and Encoding
    # ====================

    def state_key(self, key: str) -> str:
        """Ledger key for a primary key; empty primary keys are rejected in both key modes"""
        if not isinstance(key, str) or not key:
            raise LedgerStorageError(
                f"{self.record_type.KIND} key must be a non-empty string", key=str(key)
            )
        if self.namespacing:
            return f"{self.namespace}{NAMESPACE_SEPARATOR}{key}"
        return key

    def scan_bounds(self) -> Tuple[str, str]:
        """Range covering every key of this kind"""
        if self.namespacing:
            return (
                f"{self.namespace}{NAMESPACE_SEPARATOR}",
                f"{self.namespace}\x01",
            )
        return ("", "")

    def encode(self, record: RecordT) -> bytes:
        try:
            return record.model_dump_json(by_alias=True).encode("utf-8")
        except (ValueError, TypeError) as e:
            raise RecordSerializationError(
                f"failed to encode {self.record_type.KIND} {record.primary_key}: {e}",
                key=record.primary_key,
            ) from e

    def decode(self, key: str, raw: bytes) -> RecordT:
        try:
            return self.record_type.model_validate_json(raw)
        except ValidationError as e:
            raise RecordSerializationError(
                f"stored value at {key!r} is not a valid {self.record_type.KIND}: "
                f"{e.error_count()} error(s)",
                key=key,
            ) from e

    # ====================
    # Store Boundary
    # ====================

    async def _get(self, stub: ChaincodeStubProtocol, key: str) -> Optional[bytes]:
        try:
            return await stub.get_state(self.state_key(key))
        except LedgerContractError:
            raise
        except Exception as e:
            raise LedgerStorageError(f"failed to read from world state: {e}", key=key) from e

    async def _put(self, stub: ChaincodeStubProtocol, record: RecordT) -> None:
        value = self.encode(record)
        try:
            await stub.put_state(self.state_key(record.primary_key), value)
        except LedgerContractError:
            raise
        except Exception as e:
            raise LedgerStorageError(
                f"failed to put to world state: {e}", key=record.primary_key
            ) from e

    async def _delete(self, stub: ChaincodeStubProtocol, key: str) -> None:
        try:
            await stub.del_state(self.state_key(key))
        except LedgerContractError:
            raise
        except Exception as e:
            raise LedgerStorageError(f"failed to delete from world state: {e}", key=key) from e

    # ====================
    # CRUD
    # ====================

    async def exists(self, stub: ChaincodeStubProtocol, key: str) -> bool:
        return await self._get(stub, key) is not None

    async def read(self, stub: ChaincodeStubProtocol, key: str) -> RecordT:
        raw = await self._get(stub, key)
        if raw is None:
            raise RecordNotFoundError(f"the {self.record_type.KIND} {key} does not exist", key=key)
        return self.decode(key, raw)

    async def create(self, stub: ChaincodeStubProtocol, record: RecordT) -> None:
        key = record.primary_key
        if await self.exists(stub, key):
            raise RecordAlreadyExistsError(f"the {self.record_type.KIND} {key} already exists", key=key)
        await self._put(stub, record)
        logger.debug(f"Created {self.record_type.KIND} {key}")

    async def update(self, stub: ChaincodeStubProtocol, record: RecordT) -> None:
        """Replace the whole stored record"""
        key = record.primary_key
        if not await self.exists(stub, key):
            raise RecordNotFoundError(f"the {self.record_type.KIND} {key} does not exist", key=key)
        await self._put(stub, record)
        logger.debug(f"Updated {self.record_type.KIND} {key}")

    async def delete(self, stub: ChaincodeStubProtocol, key: str) -> None:
        if not await self.exists(stub, key):
            raise RecordNotFoundError(f"the {self.record_type.KIND} {key} does not exist", key=key)
        await self._delete(stub, key)
        logger.debug(f"Deleted {self.record_type.KIND} {key}")

    async def put(self, stub: ChaincodeStubProtocol, record: RecordT) -> None:
        """Unconditional write"""
        await self._put(stub, record)

    async def seed(
        self,
        stub: ChaincodeStubProtocol,
        records: Iterable[RecordT],
        overwrite: bool = False,
    ) -> int:
        """Write a fixed record set; without overwrite, existing keys are skipped"""
        written = 0
        for record in records:
            if not overwrite and await self.exists(stub, record.primary_key):
                logger.debug(f"Seed skipped existing {self.record_type.KIND} {record.primary_key}")
                continue
            await self._put(stub, record)
            written += 1
        return written

    # ====================
    # Enumeration
    # ====================

    async def scan_all(self, stub: ChaincodeStubProtocol) -> AsyncIterator[RecordT]:
        """Yield every stored record of this kind; the range cursor is always closed"""
        start_key, end_key = self.scan_bounds()
        try:
            results = await stub.get_state_by_range(start_key, end_key)
        except LedgerContractError:
            raise
        except Exception as e:
            raise LedgerStorageError(f"failed to open range query: {e}") from e

        async with results:
            while True:
                try:
                    entry = await results.__anext__()
                except StopAsyncIteration:
                    break
                except LedgerContractError:
                    raise
                except Exception as e:
                    raise LedgerStorageError(f"failed to iterate range query: {e}") from e
                yield self.decode(entry.key, entry.value)


__all__ = [
    "NAMESPACE_SEPARATOR",
    "LedgerRecord",
    "RecordEngine",
]
