"""
Case Service - Contracts Package

- data_contract.py: test data factory and request builders
"""

from .data_contract import CaseTestDataFactory

__all__ = ["CaseTestDataFactory"]
