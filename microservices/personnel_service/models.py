"""
Personnel Service Data Models

Pydantic models for police personnel records and the API around them.
Record attributes are snake_case; the ledger and the API use the camelCase
wire names given as aliases.
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from core.ledger import LedgerRecord


# ====================
# Core Data Models
# ====================

class PersonnelRecord(LedgerRecord):
    """Police personnel record stored under officerID

    Decoding also accepts the field names written by the legacy chaincode
    (officerId, dob, suspension); encoding always uses the camelCase names.
    """

    KEY_FIELD: ClassVar[str] = "officer_id"
    KIND: ClassVar[str] = "officer"

    officer_id: str = Field(
        ...,
        alias="officerID",
        validation_alias=AliasChoices("officerID", "officerId", "officer_id"),
        description="Unique officer ID",
    )
    name: str
    rank: str
    date_of_birth: str = Field(
        ..., alias="dateOfBirth", validation_alias=AliasChoices("dateOfBirth", "dob", "date_of_birth")
    )
    posting: str
    badge_number: str = Field(..., alias="badgeNumber")
    employment_status: str = Field(..., alias="employmentStatus")
    date_of_joining: str = Field(..., alias="dateOfJoining")
    award: str
    suspension_note: str = Field(
        ..., alias="suspensionNote", validation_alias=AliasChoices("suspensionNote", "suspension", "suspension_note")
    )
    last_updated_by: str = Field(..., alias="lastUpdatedBy")
    last_updated_on: str = Field(..., alias="lastUpdatedOn")


# Transaction argument order after officerID
PERSONNEL_FIELDS: List[str] = [
    "name",
    "rank",
    "date_of_birth",
    "posting",
    "badge_number",
    "employment_status",
    "date_of_joining",
    "award",
    "suspension_note",
    "last_updated_by",
    "last_updated_on",
]


# ====================
# Request Models
# ====================

class PersonnelUpdateRequest(BaseModel):
    """Full replacement of a personnel record; every field is required"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    rank: str
    date_of_birth: str = Field(..., alias="dateOfBirth")
    posting: str
    badge_number: str = Field(..., alias="badgeNumber")
    employment_status: str = Field(..., alias="employmentStatus")
    date_of_joining: str = Field(..., alias="dateOfJoining")
    award: str
    suspension_note: str = Field(..., alias="suspensionNote")
    last_updated_by: str = Field(..., alias="lastUpdatedBy")
    last_updated_on: str = Field(..., alias="lastUpdatedOn")


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


class PersonnelOperationResponse(BaseModel):
    """Result of a write operation"""
    success: bool
    message: str
    officer_id: Optional[str] = None


class PersonnelExistsResponse(BaseModel):
    """Existence check result"""
    officer_id: str
    exists: bool


class PersonnelListResponse(BaseModel):
    """Every personnel record on the ledger"""
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
    "PersonnelRecord",
    "PERSONNEL_FIELDS",
    "PersonnelUpdateRequest",
    "TransactionRequest",
    "TransactionResponse",
    "PersonnelOperationResponse",
    "PersonnelExistsResponse",
    "PersonnelListResponse",
    "HealthResponse",
    "ServiceInfo",
]
