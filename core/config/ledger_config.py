#!/usr/bin/env python3
"""Ledger platform main configuration

Main configuration for the police records ledger services.
Combines the logging sub-config with contract settings: the authorized
organization, the access policy profile, seed mode and key namespacing.
"""
import os
from dataclasses import dataclass, field
from enum import Enum

from core.ledger.access_policy import PolicyProfile

from .logging_config import LoggingConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


class SeedMode(str, Enum):
    """How the bootstrap seeder treats keys that already exist"""
    SKIP_EXISTING = "skip_existing"
    OVERWRITE = "overwrite"


@dataclass
class LedgerConfig:
    """Main ledger platform configuration with all sub-configs"""

    # Environment
    environment: str = "development"
    debug: bool = False

    # Default service settings (each microservice overrides the port)
    default_host: str = "0.0.0.0"
    default_port: int = 8000
    personnel_service_port: int = 8301
    case_service_port: int = 8302

    # Ledger
    channel_name: str = "mychannel"

    # Contracts
    authorized_msp_id: str = "Org1MSP"
    access_policy: str = "observed"
    seed_mode: SeedMode = SeedMode.SKIP_EXISTING
    key_namespacing: bool = True

    # Sub-configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        try:
            self.access_policy = PolicyProfile(self.access_policy).value
        except ValueError:
            raise ValueError(
                f"Invalid access policy {self.access_policy!r}; expected one of {[p.value for p in PolicyProfile]}"
            )
        try:
            self.seed_mode = SeedMode(self.seed_mode)
        except ValueError:
            raise ValueError(
                f"Invalid seed mode {self.seed_mode!r}; expected one of {[m.value for m in SeedMode]}"
            )
        if not self.authorized_msp_id:
            raise ValueError("authorized_msp_id must not be empty")

    @classmethod
    def from_env(cls) -> 'LedgerConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            # Environment
            environment=env,
            debug=_bool(os.getenv("DEBUG", "true" if env == "development" else "false")),

            # Service settings
            default_host=os.getenv("HOST", "0.0.0.0"),
            default_port=_int(os.getenv("PORT", "8000"), 8000),
            personnel_service_port=_int(os.getenv("PERSONNEL_SERVICE_PORT", "8301"), 8301),
            case_service_port=_int(os.getenv("CASE_SERVICE_PORT", "8302"), 8302),

            # Ledger
            channel_name=os.getenv("CHANNEL_NAME", "mychannel"),

            # Contracts
            authorized_msp_id=os.getenv("LEDGER_AUTHORIZED_MSP_ID", "Org1MSP"),
            access_policy=os.getenv("LEDGER_ACCESS_POLICY", "observed").lower(),
            seed_mode=os.getenv("LEDGER_SEED_MODE", SeedMode.SKIP_EXISTING.value).lower(),
            key_namespacing=_bool(os.getenv("LEDGER_KEY_NAMESPACING", "true")),

            # Load sub-configs
            logging=LoggingConfig.from_env(),
        )
