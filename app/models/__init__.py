"""
Database models package
"""

from .event import Event
from .confirmation import Confirmation

__all__ = ["Event", "Confirmation"]
