"""
Personnel Service - Contracts Package

- data_contract.py: test data factory and request builders
"""

from .data_contract import PersonnelTestDataFactory

__all__ = ["PersonnelTestDataFactory"]
