"""
Personnel Microservice Package

Police personnel records contract and its HTTP surface.
"""

from .models import PersonnelRecord
from .personnel_service import PersonnelContract
from .personnel_repository import PersonnelRepository

__all__ = [
    'PersonnelContract',
    'PersonnelRepository',
    'PersonnelRecord',
]
