"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Contract and API tests (in-memory ledger, real contracts)
    - unit/       : Unit tests (ledger runtime pieces, no services)
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from core.config import LedgerConfig
from core.ledger import ClientIdentity, InMemoryLedger


# =============================================================================
# Test Configuration
# =============================================================================

AUTHORIZED_MSP_ID = "Org1MSP"
OTHER_MSP_ID = "Org2MSP"


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")


# =============================================================================
# Ledger Fixtures
# =============================================================================

@pytest.fixture
def ledger() -> InMemoryLedger:
    """Fresh, empty world state per test"""
    return InMemoryLedger("testchannel")


@pytest.fixture
def ledger_config() -> LedgerConfig:
    """Default contract settings: observed policy, skip-existing seeding, namespaced keys"""
    return LedgerConfig(channel_name="testchannel")


@pytest.fixture
def org1() -> ClientIdentity:
    """Caller from the authorized organization"""
    return ClientIdentity(AUTHORIZED_MSP_ID)


@pytest.fixture
def org2() -> ClientIdentity:
    """Caller from any other organization"""
    return ClientIdentity(OTHER_MSP_ID)


@pytest.fixture
def anonymous() -> ClientIdentity:
    """Caller whose identity carries no MSP ID"""
    return ClientIdentity()
