"""
Ledger Contract Errors

Error taxonomy shared by every contract. Any of these aborts the invocation;
the runner discards the write set so nothing is partially applied.
"""


class LedgerContractError(Exception):
    """Base exception for contract failures"""

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key


class AuthorizationDeniedError(LedgerContractError):
    """Raised when the caller's organization may not run the operation"""

    def __init__(self, message: str, operation: str = "", msp_id: str = ""):
        super().__init__(message)
        self.operation = operation
        self.msp_id = msp_id


class RecordNotFoundError(LedgerContractError):
    """Raised when an operation requires an existing key"""
    pass


class RecordAlreadyExistsError(LedgerContractError):
    """Raised when create finds the key already present"""
    pass


class RecordSerializationError(LedgerContractError):
    """Raised when a stored value cannot be decoded or a record cannot be encoded"""
    pass


class LedgerStorageError(LedgerContractError):
    """Raised when the underlying state store call fails"""
    pass


class IdentityUnavailableError(LedgerContractError):
    """Raised when the caller identity carries no usable MSP ID"""
    pass


class UnknownTransactionError(LedgerContractError):
    """Raised when an invocation names a function the contract does not expose"""
    pass


class InvalidArgumentsError(LedgerContractError):
    """Raised when an invocation carries the wrong number or type of arguments"""

    def __init__(self, message: str, expected: int = 0, received: int = 0):
        super().__init__(message)
        self.expected = expected
        self.received = received


# HTTP status reported by the service layer for each failure kind
HTTP_STATUS_BY_ERROR = {
    AuthorizationDeniedError: 403,
    RecordNotFoundError: 404,
    UnknownTransactionError: 404,
    RecordAlreadyExistsError: 409,
    InvalidArgumentsError: 400,
    RecordSerializationError: 500,
    LedgerStorageError: 503,
}


def http_status_for(error: LedgerContractError) -> int:
    """HTTP status for a contract error; unknown kinds map to 500"""
    for error_type, status_code in HTTP_STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return 500


__all__ = [
    "HTTP_STATUS_BY_ERROR",
    "http_status_for",
    "LedgerContractError",
    "AuthorizationDeniedError",
    "RecordNotFoundError",
    "RecordAlreadyExistsError",
    "RecordSerializationError",
    "LedgerStorageError",
    "IdentityUnavailableError",
    "UnknownTransactionError",
    "InvalidArgumentsError",
]
