"""
Caller Identity

The organizational identity of the party that submitted a transaction.
Contracts only ever ask for the MSP ID.
"""

from typing import Optional, Protocol

from .errors import IdentityUnavailableError


class ClientIdentityProtocol(Protocol):
    """Identity of the invoking client"""

    def get_msp_id(self) -> str:
        """Return the caller's organization MSP ID"""
        ...


class ClientIdentity:
    """Client identity carrying a plain MSP ID"""

    def __init__(self, msp_id: Optional[str] = None):
        self._msp_id = msp_id.strip() if msp_id else None

    def get_msp_id(self) -> str:
        if not self._msp_id:
            raise IdentityUnavailableError("caller identity carries no MSP ID")
        return self._msp_id

    def __repr__(self) -> str:
        return f"ClientIdentity(msp_id={self._msp_id!r})"


__all__ = ["ClientIdentityProtocol", "ClientIdentity"]
