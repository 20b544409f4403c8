"""
Personnel Contract Business Logic

Transaction functions for police personnel records: bootstrap seeding,
create / read / full-replace update / delete, existence check and listing.
Gating follows the access policy table held by the authorization gate.
"""

import logging
from typing import List

from core.config import SeedMode
from core.ledger import AuthorizationGate, Contract, TransactionContext, transaction

from .models import PersonnelRecord
from .protocols import PersonnelRepositoryProtocol

logger = logging.getLogger(__name__)


# Bootstrap records written by seedPersonnel
SEED_PERSONNEL: List[PersonnelRecord] = [
    PersonnelRecord(
        officer_id="POL12345",
        name="Inspector Anjali Mehta",
        rank="Inspector",
        date_of_birth="1985-08-15",
        posting="Cyber Crime Unit, Mumbai",
        badge_number="MUM-4521",
        employment_status="Active",
        date_of_joining="2010-06-12",
        award="Gallantry Award 2018",
        suspension_note="",
        last_updated_by="Org1",
        last_updated_on="2025-04-06",
    ),
]


class PersonnelContract(Contract):
    """Personnel records contract"""

    contract_name = "personnel"

    def __init__(
        self,
        repository: PersonnelRepositoryProtocol,
        gate: AuthorizationGate,
        seed_mode: SeedMode = SeedMode.SKIP_EXISTING,
    ):
        """
        Initialize personnel contract with injected dependencies

        Args:
            repository: Record engine for personnel records
            gate: Authorization gate carrying the access policy
            seed_mode: Whether seeding skips or overwrites existing keys
        """
        super().__init__(gate)
        self.repository = repository
        self.seed_mode = SeedMode(seed_mode)

        logger.info("PersonnelContract initialized with dependency injection")

    # ====================
    # Bootstrap
    # ====================

    @transaction("seedPersonnel", "InitLedger")
    async def seed_personnel(self, ctx: TransactionContext) -> None:
        """Write the bootstrap personnel records"""
        written = await self.repository.seed(
            ctx.stub,
            SEED_PERSONNEL,
            overwrite=self.seed_mode == SeedMode.OVERWRITE,
        )
        logger.info(f"Seeded {written} of {len(SEED_PERSONNEL)} personnel records")

    # ====================
    # Record CRUD
    # ====================

    @transaction("createPersonnel", "CreatePolicePersonnel")
    async def create_personnel(
        self,
        ctx: TransactionContext,
        officer_id: str,
        name: str,
        rank: str,
        dob: str,
        posting: str,
        badge_number: str,
        employment_status: str,
        date_of_joining: str,
        award: str,
        suspension_note: str,
        last_updated_by: str,
        last_updated_on: str,
    ) -> None:
        """Issue a new personnel record; fails if officer_id exists"""
        record = PersonnelRecord(
            officer_id=officer_id,
            name=name,
            rank=rank,
            date_of_birth=dob,
            posting=posting,
            badge_number=badge_number,
            employment_status=employment_status,
            date_of_joining=date_of_joining,
            award=award,
            suspension_note=suspension_note,
            last_updated_by=last_updated_by,
            last_updated_on=last_updated_on,
        )
        await self.repository.create(ctx.stub, record)
        logger.info(f"Personnel record {officer_id} created")

    @transaction("readPersonnel", "ReadPolicePersonnel")
    async def read_personnel(self, ctx: TransactionContext, officer_id: str) -> PersonnelRecord:
        return await self.repository.read(ctx.stub, officer_id)

    @transaction("updatePersonnel", "UpdatePolicePersonnel")
    async def update_personnel(
        self,
        ctx: TransactionContext,
        officer_id: str,
        name: str,
        rank: str,
        dob: str,
        posting: str,
        badge_number: str,
        employment_status: str,
        date_of_joining: str,
        award: str,
        suspension_note: str,
        last_updated_by: str,
        last_updated_on: str,
    ) -> None:
        """Replace every field of an existing record"""
        record = PersonnelRecord(
            officer_id=officer_id,
            name=name,
            rank=rank,
            date_of_birth=dob,
            posting=posting,
            badge_number=badge_number,
            employment_status=employment_status,
            date_of_joining=date_of_joining,
            award=award,
            suspension_note=suspension_note,
            last_updated_by=last_updated_by,
            last_updated_on=last_updated_on,
        )
        await self.repository.update(ctx.stub, record)
        logger.info(f"Personnel record {officer_id} updated")

    @transaction("deletePersonnel", "DeletePolicePersonnel")
    async def delete_personnel(self, ctx: TransactionContext, officer_id: str) -> None:
        await self.repository.delete(ctx.stub, officer_id)
        logger.info(f"Personnel record {officer_id} deleted")

    @transaction("personnelExists", "PersonnelExists")
    async def personnel_exists(self, ctx: TransactionContext, officer_id: str) -> bool:
        return await self.repository.exists(ctx.stub, officer_id)

    # ====================
    # Enumeration
    # ====================

    @transaction("listAllPersonnel", "GetAllPersonnel")
    async def list_all_personnel(self, ctx: TransactionContext) -> List[PersonnelRecord]:
        return [record async for record in self.repository.scan_all(ctx.stub)]


__all__ = ["PersonnelContract", "SEED_PERSONNEL"]
