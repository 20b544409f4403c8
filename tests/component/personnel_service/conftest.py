"""
Component Test Fixtures for Personnel Service

Provides a FastAPI TestClient whose runner points at a fresh in-memory ledger.
"""

import pytest
from fastapi.testclient import TestClient

from microservices.personnel_service.factory import create_personnel_runner


@pytest.fixture
def personnel_runner(ledger, ledger_config):
    return create_personnel_runner(config=ledger_config, ledger=ledger)


@pytest.fixture
def client(monkeypatch, personnel_runner):
    """Create FastAPI test client backed by an isolated ledger"""
    from microservices.personnel_service import main

    with TestClient(main.app, raise_server_exceptions=False) as test_client:
        monkeypatch.setattr(main, "runner", personnel_runner)
        yield test_client


@pytest.fixture
def org1_headers():
    return {"X-MSP-ID": "Org1MSP"}


@pytest.fixture
def org2_headers():
    return {"X-MSP-ID": "Org2MSP"}
