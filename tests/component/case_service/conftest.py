"""
Component Test Fixtures for Case Service

Provides a FastAPI TestClient whose runner points at a fresh in-memory ledger.
"""

import pytest
from fastapi.testclient import TestClient

from microservices.case_service.factory import create_case_runner


@pytest.fixture
def case_runner(ledger, ledger_config):
    return create_case_runner(config=ledger_config, ledger=ledger)


@pytest.fixture
def client(monkeypatch, case_runner):
    """Create FastAPI test client backed by an isolated ledger"""
    from microservices.case_service import main

    with TestClient(main.app, raise_server_exceptions=False) as test_client:
        monkeypatch.setattr(main, "runner", case_runner)
        yield test_client


@pytest.fixture
def org1_headers():
    return {"X-MSP-ID": "Org1MSP"}


@pytest.fixture
def org2_headers():
    return {"X-MSP-ID": "Org2MSP"}
