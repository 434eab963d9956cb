"""
Pydantic schemas package
"""

from .common import *
from .confirmation import *
from .event import *

__all__ = [
    "MessageResponse",
    "DataResponse",
    "ErrorResponse",
    "ConfirmationCreate",
    "ConfirmationUpdate",
    "ConfirmationResponse",
    "EventCreate",
    "EventSummary",
    "EventDetails",
    "EventAttendance",
]
