"""
Event-related Pydantic schemas
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field

from app.schemas.confirmation import ConfirmationResponse

class EventCreate(BaseModel):
    """Body of an event creation request; fields are checked by the validation rules"""
    eventId: Optional[Any] = None
    name: Optional[Any] = None
    date: Optional[Any] = None

class EventSummary(BaseModel):
    """One row of the event list"""
    id: str
    name: str
    date: str

    class Config:
        from_attributes = True

class EventDetails(BaseModel):
    """Fields of an event visible to anyone holding its link"""
    name: str
    date: str

    class Config:
        from_attributes = True

class EventAttendance(BaseModel):
    """Event details together with its confirmations, newest first"""
    details: EventDetails
    confirmations: List[ConfirmationResponse] = Field(default_factory=list)
    total_guests: int = 0
