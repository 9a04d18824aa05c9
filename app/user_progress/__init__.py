"""
User progress subsystem: partner validation and per-partner progress records.
"""

from .services import UserProgressService

__all__ = ['UserProgressService']
