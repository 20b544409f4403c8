"""
Personnel Service Factory

Factory for creating PersonnelContract with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from typing import Optional

from core.config import LedgerConfig, get_settings
from core.ledger import AccessPolicy, AuthorizationGate, ContractRunner, InMemoryLedger, get_ledger

from .personnel_repository import PersonnelRepository
from .personnel_service import PersonnelContract

logger = logging.getLogger(__name__)


def create_personnel_contract(config: Optional[LedgerConfig] = None) -> PersonnelContract:
    """
    Create PersonnelContract with all real dependencies

    Args:
        config: Optional ledger config (uses global settings if not provided)

    Returns:
        Fully initialized PersonnelContract instance
    """
    if config is None:
        config = get_settings()

    repository = PersonnelRepository(namespacing=config.key_namespacing)
    gate = AuthorizationGate(
        authorized_msp_id=config.authorized_msp_id,
        policy=AccessPolicy.from_profile(config.access_policy),
    )

    logger.info(
        f"PersonnelContract created (policy={config.access_policy}, "
        f"seed_mode={config.seed_mode.value}, namespacing={config.key_namespacing})"
    )

    return PersonnelContract(
        repository=repository,
        gate=gate,
        seed_mode=config.seed_mode,
    )


def create_personnel_runner(
    config: Optional[LedgerConfig] = None,
    ledger: Optional[InMemoryLedger] = None,
) -> ContractRunner:
    """Create a runner for the personnel contract on the channel's world state"""
    if config is None:
        config = get_settings()
    if ledger is None:
        ledger = get_ledger(config.channel_name)
    return ContractRunner(create_personnel_contract(config), ledger)


__all__ = ["create_personnel_contract", "create_personnel_runner"]
