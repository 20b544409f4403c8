"""
Personnel Service Data Repository

Data access layer - ledger world state, one JSON value per officer
"""

import logging

from core.ledger import RecordEngine

from .models import PersonnelRecord

logger = logging.getLogger(__name__)


class PersonnelRepository(RecordEngine[PersonnelRecord]):
    """Personnel records on the ledger, keyed by officerID"""

    NAMESPACE = "personnel"

    def __init__(self, namespacing: bool = True):
        super().__init__(PersonnelRecord, self.NAMESPACE, namespacing=namespacing)
        if not namespacing:
            logger.warning(
                "Personnel keys are not namespaced; listing decodes every key in the ledger"
            )


__all__ = ["PersonnelRepository"]
