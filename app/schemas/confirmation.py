"""
Confirmation-related Pydantic schemas
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel

class ConfirmationCreate(BaseModel):
    """Public RSVP submission"""
    eventId: Optional[Any] = None
    name: Optional[Any] = None
    guests: Optional[Any] = None

class ConfirmationUpdate(BaseModel):
    """Admin edit of an existing confirmation"""
    name: Optional[Any] = None
    guests: Optional[Any] = None

class ConfirmationResponse(BaseModel):
    """Confirmation response schema"""
    id: str
    name: str
    guests: int
    confirmed_at: datetime

    class Config:
        from_attributes = True
