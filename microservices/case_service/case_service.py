"""
Case Contract Business Logic

Transaction functions for first information reports: bootstrap seeding,
filing, reading, status-only update, deletion, existence check and listing.
Case records have no full-replace update; updateCaseStatus can change the
status field and nothing else.
"""

import logging
from typing import List

from core.config import SeedMode
from core.ledger import AuthorizationGate, Contract, TransactionContext, transaction

from .models import CaseRecord
from .protocols import CaseRepositoryProtocol

logger = logging.getLogger(__name__)


# Bootstrap records written by seedCases
SEED_CASES: List[CaseRecord] = [
    CaseRecord(
        case_id="FIR1",
        filed_by="OfficerA",
        accused="John Doe",
        crime_type="Theft",
        description="Stolen bike",
        status="Open",
        timestamp="2024-01-01T10:00:00Z",
    ),
    CaseRecord(
        case_id="FIR2",
        filed_by="OfficerB",
        accused="Jane Smith",
        crime_type="Assault",
        description="Physical altercation",
        status="Investigation",
        timestamp="2024-01-02T14:30:00Z",
    ),
]


class CaseContract(Contract):
    """FIR case records contract"""

    contract_name = "case"

    def __init__(
        self,
        repository: CaseRepositoryProtocol,
        gate: AuthorizationGate,
        seed_mode: SeedMode = SeedMode.SKIP_EXISTING,
    ):
        super().__init__(gate)
        self.repository = repository
        self.seed_mode = SeedMode(seed_mode)

        logger.info("CaseContract initialized with dependency injection")

    # ====================
    # Bootstrap
    # ====================

    @transaction("seedCases", "InitLedger")
    async def seed_cases(self, ctx: TransactionContext) -> None:
        """Write the bootstrap FIRs"""
        written = await self.repository.seed(
            ctx.stub,
            SEED_CASES,
            overwrite=self.seed_mode == SeedMode.OVERWRITE,
        )
        logger.info(f"Seeded {written} of {len(SEED_CASES)} case records")

    # ====================
    # Record CRUD
    # ====================

    @transaction("fileCase", "FileFIR")
    async def file_case(
        self,
        ctx: TransactionContext,
        case_id: str,
        filed_by: str,
        accused: str,
        crime_type: str,
        description: str,
        status: str,
        timestamp: str,
    ) -> None:
        """File a new FIR; fails if case_id exists"""
        record = CaseRecord(
            case_id=case_id,
            filed_by=filed_by,
            accused=accused,
            crime_type=crime_type,
            description=description,
            status=status,
            timestamp=timestamp,
        )
        await self.repository.create(ctx.stub, record)
        logger.info(f"Case {case_id} filed")

    @transaction("readCase", "ReadFIR")
    async def read_case(self, ctx: TransactionContext, case_id: str) -> CaseRecord:
        return await self.repository.read(ctx.stub, case_id)

    @transaction("updateCaseStatus", "UpdateFIR")
    async def update_case_status(self, ctx: TransactionContext, case_id: str, new_status: str) -> None:
        """Change only the status of an existing FIR"""
        record = await self.repository.read(ctx.stub, case_id)
        previous_status = record.status
        await self.repository.update(ctx.stub, record.model_copy(update={"status": new_status}))
        logger.info(f"Case {case_id} status changed from {previous_status!r} to {new_status!r}")

    @transaction("deleteCase", "DeleteFIR")
    async def delete_case(self, ctx: TransactionContext, case_id: str) -> None:
        await self.repository.delete(ctx.stub, case_id)
        logger.info(f"Case {case_id} deleted")

    @transaction("caseExists", "FIRExists")
    async def case_exists(self, ctx: TransactionContext, case_id: str) -> bool:
        return await self.repository.exists(ctx.stub, case_id)

    # ====================
    # Enumeration
    # ====================

    @transaction("listAllCases", "GetAllFIRs")
    async def list_all_cases(self, ctx: TransactionContext) -> List[CaseRecord]:
        return [record async for record in self.repository.scan_all(ctx.stub)]


__all__ = ["CaseContract", "SEED_CASES"]
