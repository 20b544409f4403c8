"""
Case Service Data Models

Pydantic models for first information report (FIR) case records.
Attributes are snake_case with camelCase wire-name aliases.
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from core.ledger import LedgerRecord


# ====================
# Core Data Models
# ====================

class CaseRecord(LedgerRecord):
    """FIR case record stored under caseID

    Decoding also accepts the capitalized field names written by the legacy
    FIR chaincode (FIRID, FiledBy, ...); encoding always uses the names below.
    """

    KEY_FIELD: ClassVar[str] = "case_id"
    KIND: ClassVar[str] = "FIR"

    case_id: str = Field(
        ...,
        alias="caseID",
        validation_alias=AliasChoices("caseID", "FIRID", "case_id"),
        description="Unique case ID",
    )
    filed_by: str = Field(..., alias="filedBy", validation_alias=AliasChoices("filedBy", "FiledBy", "filed_by"))
    accused: str = Field(..., validation_alias=AliasChoices("accused", "Accused"))
    crime_type: str = Field(..., alias="crimeType", validation_alias=AliasChoices("crimeType", "CrimeType", "crime_type"))
    description: str = Field(..., validation_alias=AliasChoices("description", "Description"))
    status: str = Field(..., validation_alias=AliasChoices("status", "Status"))
    timestamp: str = Field(..., validation_alias=AliasChoices("timestamp", "Timestamp"))


# Transaction argument order after caseID
CASE_FIELDS: List[str] = [
    "filed_by",
    "accused",
    "crime_type",
    "description",
    "status",
    "timestamp",
]


# ====================
# Request Models
# ====================

class CaseStatusUpdateRequest(BaseModel):
    """New status for an existing case"""
    status: str


class TransactionRequest(BaseModel):
    """Raw invocation: ordered string arguments"""
    args: List[str] = Field(default_factory=list)


# ====================
# Response Models
# ====================

class TransactionResponse(BaseModel):
    """Result of a raw invocation"""
    success: bool
    function: str
    result: Optional[Any] = None


class CaseOperationResponse(BaseModel):
    """Result of a write operation"""
    success: bool
    message: str
    case_id: Optional[str] = None


class CaseExistsResponse(BaseModel):
    """Existence check result"""
    case_id: str
    exists: bool


class CaseListResponse(BaseModel):
    """Every case record on the ledger"""
    records: List[Dict[str, Any]]
    count: int


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    port: int
    version: str
    dependencies: Dict[str, str]


class ServiceInfo(BaseModel):
    """Service information"""
    service: str
    version: str
    description: str
    capabilities: List[str]
    transactions: List[str] = Field(default_factory=list)
    access_policy: str = ""
    open_operations: List[str] = Field(default_factory=list)


__all__ = [
    "CaseRecord",
    "CASE_FIELDS",
    "CaseStatusUpdateRequest",
    "TransactionRequest",
    "TransactionResponse",
    "CaseOperationResponse",
    "CaseExistsResponse",
    "CaseListResponse",
    "HealthResponse",
    "ServiceInfo",
]
