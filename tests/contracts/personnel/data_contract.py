"""
Personnel Service - Data Contract

Test data factory and request builders for personnel_service.
Generated IDs keep tests independent of each other and of the seed record.
"""

import secrets
import uuid
from typing import Any, Dict, List, Optional

# Wire names in transaction argument order, officerID first
PERSONNEL_WIRE_FIELDS = [
    "officerID",
    "name",
    "rank",
    "dateOfBirth",
    "posting",
    "badgeNumber",
    "employmentStatus",
    "dateOfJoining",
    "award",
    "suspensionNote",
    "lastUpdatedBy",
    "lastUpdatedOn",
]


class PersonnelTestDataFactory:
    """Test data factory for personnel_service"""

    RANKS = ["Constable", "Head Constable", "Sub-Inspector", "Inspector", "Superintendent"]
    POSTINGS = ["Traffic Division, Pune", "Crime Branch, Delhi", "Cyber Crime Unit, Mumbai"]

    # ========================================
    # Valid ID Generators
    # ========================================

    @staticmethod
    def make_officer_id() -> str:
        """Generate valid officer ID"""
        return f"POL{uuid.uuid4().hex[:8].upper()}"

    @staticmethod
    def make_badge_number() -> str:
        return f"BDG-{secrets.randbelow(9000) + 1000}"

    # ========================================
    # Payload Builders
    # ========================================

    @classmethod
    def make_personnel(cls, officer_id: Optional[str] = None, **overrides: str) -> Dict[str, str]:
        """Personnel record keyed by wire name"""
        record = {
            "officerID": officer_id or cls.make_officer_id(),
            "name": f"Officer {uuid.uuid4().hex[:6]}",
            "rank": secrets.choice(cls.RANKS),
            "dateOfBirth": "1990-03-21",
            "posting": secrets.choice(cls.POSTINGS),
            "badgeNumber": cls.make_badge_number(),
            "employmentStatus": "Active",
            "dateOfJoining": "2015-07-01",
            "award": "",
            "suspensionNote": "",
            "lastUpdatedBy": "Org1",
            "lastUpdatedOn": "2025-01-15",
        }
        record.update(overrides)
        return record

    @staticmethod
    def to_args(record: Dict[str, Any]) -> List[str]:
        """Positional transaction arguments for create / update"""
        return [record[field] for field in PERSONNEL_WIRE_FIELDS]

    @classmethod
    def make_personnel_args(cls, officer_id: Optional[str] = None, **overrides: str) -> List[str]:
        return cls.to_args(cls.make_personnel(officer_id, **overrides))

    @staticmethod
    def make_update_request(record: Dict[str, Any]) -> Dict[str, Any]:
        """Body for PUT /api/v1/personnel/{officer_id}"""
        return {k: v for k, v in record.items() if k != "officerID"}


__all__ = ["PERSONNEL_WIRE_FIELDS", "PersonnelTestDataFactory"]
