"""
Ledger State Stub

Key-value interface consumed by contract code, plus an in-memory world state
used for local services and tests.

Usage:
    ledger = get_ledger("mychannel")
    stub = TransactionStub(ledger, tx_id="tx-1")

    await stub.put_state("key", b"value")
    async with await stub.get_state_by_range("", "") as results:
        async for entry in results:
            ...

    ledger.commit(stub.write_set, stub.tx_id)
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from .errors import LedgerStorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateEntry:
    """One (key, value) pair returned by a range query"""
    key: str
    value: bytes


class StateQueryIterator:
    """
    Async iterator over the result of a range query.

    The iterator is finite and not restartable. It holds a cursor on the
    state store, so callers must close it; using it as an async context
    manager guarantees that on every exit path.
    """

    def __init__(self, entries: List[StateEntry]):
        self._entries = entries
        self._position = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> "StateQueryIterator":
        return self

    async def __anext__(self) -> StateEntry:
        if self._closed:
            raise LedgerStorageError("range query iterator is closed")
        if self._position >= len(self._entries):
            raise StopAsyncIteration
        entry = self._entries[self._position]
        self._position += 1
        return entry

    async def close(self) -> None:
        self._closed = True
        self._entries = []

    async def __aenter__(self) -> "StateQueryIterator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


# ====================
# Stub Protocol
# ====================


class ChaincodeStubProtocol(Protocol):
    """State access available to contract code during one invocation"""

    @property
    def tx_id(self) -> str:
        """Identifier of the running transaction"""
        ...

    async def get_state(self, key: str) -> Optional[bytes]:
        """Return the value at key, or None when absent"""
        ...

    async def put_state(self, key: str, value: bytes) -> None:
        """Write value at key"""
        ...

    async def del_state(self, key: str) -> None:
        """Remove key"""
        ...

    async def get_state_by_range(self, start_key: str, end_key: str) -> StateQueryIterator:
        """Iterate keys in [start_key, end_key); empty bounds are open"""
        ...


# ====================
# In-Memory World State
# ====================


class InMemoryLedger:
    """Committed world state of one channel, held in memory"""

    def __init__(self, channel_name: str = "mychannel"):
        self.channel_name = channel_name
        self._state: Dict[str, bytes] = {}
        self.block_height = 0

    def snapshot(self) -> Dict[str, bytes]:
        """Copy of the committed state"""
        return dict(self._state)

    def get(self, key: str) -> Optional[bytes]:
        return self._state.get(key)

    def keys(self) -> List[str]:
        return sorted(self._state)

    def __len__(self) -> int:
        return len(self._state)

    def commit(self, write_set: Dict[str, Optional[bytes]], tx_id: str = "") -> None:
        """Apply a transaction's write set; None values are deletions"""
        for key, value in write_set.items():
            if value is None:
                self._state.pop(key, None)
            else:
                self._state[key] = value
        self.block_height += 1
        logger.debug(
            f"Committed tx {tx_id or '-'} to {self.channel_name}: "
            f"{len(write_set)} writes, height {self.block_height}"
        )

    def reset(self) -> None:
        self._state.clear()
        self.block_height = 0


class TransactionStub:
    """
    Per-invocation view over an InMemoryLedger.

    Reads come from a snapshot taken when the stub is created, overlaid with
    this invocation's own pending writes. Writes are buffered in a write set
    that only reaches the ledger through InMemoryLedger.commit().
    """

    def __init__(self, ledger: InMemoryLedger, tx_id: str):
        self._ledger = ledger
        self._tx_id = tx_id
        self._snapshot = ledger.snapshot()
        self._writes: Dict[str, Optional[bytes]] = {}

    @property
    def tx_id(self) -> str:
        return self._tx_id

    @property
    def write_set(self) -> Dict[str, Optional[bytes]]:
        return dict(self._writes)

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or not key:
            raise LedgerStorageError("state key must be a non-empty string", key=str(key))

    async def get_state(self, key: str) -> Optional[bytes]:
        self._check_key(key)
        if key in self._writes:
            return self._writes[key]
        return self._snapshot.get(key)

    async def put_state(self, key: str, value: bytes) -> None:
        self._check_key(key)
        if not isinstance(value, (bytes, bytearray)):
            raise LedgerStorageError(f"value for {key!r} must be bytes", key=key)
        self._writes[key] = bytes(value)

    async def del_state(self, key: str) -> None:
        self._check_key(key)
        self._writes[key] = None

    async def get_state_by_range(self, start_key: str, end_key: str) -> StateQueryIterator:
        merged = dict(self._snapshot)
        for key, value in self._writes.items():
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = value

        entries = [
            StateEntry(key=key, value=merged[key])
            for key in sorted(merged)
            if key >= start_key and (not end_key or key < end_key)
        ]
        return StateQueryIterator(entries)


# Singleton world state per channel
_ledgers: Dict[str, InMemoryLedger] = {}


def get_ledger(channel_name: str = "mychannel") -> InMemoryLedger:
    """Get or create the in-memory world state for a channel"""
    if channel_name not in _ledgers:
        _ledgers[channel_name] = InMemoryLedger(channel_name)
        logger.info(f"In-memory ledger created for channel {channel_name}")
    return _ledgers[channel_name]


__all__ = [
    "StateEntry",
    "StateQueryIterator",
    "ChaincodeStubProtocol",
    "InMemoryLedger",
    "TransactionStub",
    "get_ledger",
]
