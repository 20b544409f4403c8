"""
Personnel Service Protocols

Defines interfaces for dependency injection and testing.
Following the protocol-based architecture pattern.
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

from .models import PersonnelRecord


# ====================
# Repository Protocol
# ====================


class PersonnelRepositoryProtocol(Protocol):
    """Protocol for personnel records on the ledger"""

    async def exists(self, stub: ChaincodeStubProtocol, key: str) -> bool:
        """Check whether an officer record exists"""
        ...

    async def read(self, stub: ChaincodeStubProtocol, key: str) -> PersonnelRecord:
        """Read an officer record"""
        ...

    async def create(self, stub: ChaincodeStubProtocol, record: PersonnelRecord) -> None:
        """Create a new officer record"""
        ...

    async def update(self, stub: ChaincodeStubProtocol, record: PersonnelRecord) -> None:
        """Replace an existing officer record"""
        ...

    async def delete(self, stub: ChaincodeStubProtocol, key: str) -> None:
        """Remove an officer record"""
        ...

    async def seed(
        self,
        stub: ChaincodeStubProtocol,
        records: Iterable[PersonnelRecord],
        overwrite: bool = False,
    ) -> int:
        """Write the bootstrap records"""
        ...

    def scan_all(self, stub: ChaincodeStubProtocol) -> AsyncIterator[PersonnelRecord]:
        """Iterate every officer record"""
        ...


__all__ = [
    "PersonnelRepositoryProtocol",
    "AuthorizationDeniedError",
    "LedgerStorageError",
    "RecordAlreadyExistsError",
    "RecordNotFoundError",
    "RecordSerializationError",
]
