"""
Event model
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.core.db import Base

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Event(Base):
    __tablename__ = "events"

    # Slug chosen by the organizer; doubles as the public confirmation token
    id = Column(String(100), primary_key=True)
    name = Column(String(255), nullable=False)
    # Free text, displayed verbatim
    date = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Relationships
    confirmations = relationship(
        "Confirmation",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
