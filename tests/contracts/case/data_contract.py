"""
Case Service - Data Contract

Test data factory and request builders for case_service.
"""

import secrets
import uuid
from typing import Any, Dict, List, Optional

# Wire names in transaction argument order, caseID first
CASE_WIRE_FIELDS = [
    "caseID",
    "filedBy",
    "accused",
    "crimeType",
    "description",
    "status",
    "timestamp",
]


class CaseTestDataFactory:
    """Test data factory for case_service"""

    CRIME_TYPES = ["Theft", "Assault", "Fraud", "Burglary", "Cyber Crime"]
    STATUSES = ["Open", "Investigation", "Closed"]

    @staticmethod
    def make_case_id() -> str:
        """Generate valid case ID"""
        return f"FIR{uuid.uuid4().hex[:8].upper()}"

    @classmethod
    def make_case(cls, case_id: Optional[str] = None, **overrides: str) -> Dict[str, str]:
        """Case record keyed by wire name"""
        record = {
            "caseID": case_id or cls.make_case_id(),
            "filedBy": f"Officer{secrets.randbelow(900) + 100}",
            "accused": f"Accused {uuid.uuid4().hex[:6]}",
            "crimeType": secrets.choice(cls.CRIME_TYPES),
            "description": "Reported at the front desk",
            "status": "Open",
            "timestamp": "2024-03-01T09:15:00Z",
        }
        record.update(overrides)
        return record

    @staticmethod
    def to_args(record: Dict[str, Any]) -> List[str]:
        """Positional transaction arguments for fileCase"""
        return [record[field] for field in CASE_WIRE_FIELDS]

    @classmethod
    def make_case_args(cls, case_id: Optional[str] = None, **overrides: str) -> List[str]:
        return cls.to_args(cls.make_case(case_id, **overrides))


__all__ = ["CASE_WIRE_FIELDS", "CaseTestDataFactory"]
