#!/usr/bin/env python3
"""
Core Module for the Police Records Ledger Services

Shared components for the personnel and case microservices.

COMPONENTS:
    - config/: Environment-driven configuration (ledger + logging)
    - ledger/: Contract runtime (state stub, authorization gate, record engine, dispatch, runner)
    - logger.py: Service logger setup
    - auth_dependencies.py: FastAPI dependency resolving the caller's MSP ID

USAGE:
    from core.config import get_settings
    from core.ledger import ContractRunner, get_ledger

    config = get_settings()
    ledger = get_ledger(config.channel_name)
"""

__version__ = "1.0.0"
