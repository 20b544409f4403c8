"""
Case Microservice Package

First information report (FIR) case records contract and its HTTP surface.
"""

from .models import CaseRecord
from .case_service import CaseContract
from .case_repository import CaseRepository

__all__ = [
    'CaseContract',
    'CaseRepository',
    'CaseRecord',
]
