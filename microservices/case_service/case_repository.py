"""
Case Service Data Repository

Data access layer - ledger world state, one JSON value per FIR
"""

import logging

from core.ledger import RecordEngine

from .models import CaseRecord

logger = logging.getLogger(__name__)


class CaseRepository(RecordEngine[CaseRecord]):
    """FIR case records on the ledger, keyed by caseID"""

    NAMESPACE = "case"

    def __init__(self, namespacing: bool = True):
        super().__init__(CaseRecord, self.NAMESPACE, namespacing=namespacing)
        if not namespacing:
            logger.warning(
                "Case keys are not namespaced; listing decodes every key in the ledger"
            )


__all__ = ["CaseRepository"]
