"""
Case Service Factory

Factory for creating CaseContract with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from typing import Optional

from core.config import LedgerConfig, get_settings
from core.ledger import AccessPolicy, AuthorizationGate, ContractRunner, InMemoryLedger, get_ledger

from .case_repository import CaseRepository
from .case_service import CaseContract

logger = logging.getLogger(__name__)


def create_case_contract(config: Optional[LedgerConfig] = None) -> CaseContract:
    """
    Create CaseContract with all real dependencies

    Args:
        config: Optional ledger config (uses global settings if not provided)

    Returns:
        Fully initialized CaseContract instance
    """
    if config is None:
        config = get_settings()

    repository = CaseRepository(namespacing=config.key_namespacing)
    gate = AuthorizationGate(
        authorized_msp_id=config.authorized_msp_id,
        policy=AccessPolicy.from_profile(config.access_policy),
    )

    logger.info(
        f"CaseContract created (policy={config.access_policy}, "
        f"seed_mode={config.seed_mode.value}, namespacing={config.key_namespacing})"
    )

    return CaseContract(
        repository=repository,
        gate=gate,
        seed_mode=config.seed_mode,
    )


def create_case_runner(
    config: Optional[LedgerConfig] = None,
    ledger: Optional[InMemoryLedger] = None,
) -> ContractRunner:
    """Create a runner for the case contract on the channel's world state"""
    if config is None:
        config = get_settings()
    if ledger is None:
        ledger = get_ledger(config.channel_name)
    return ContractRunner(create_case_contract(config), ledger)


__all__ = ["create_case_contract", "create_case_runner"]
