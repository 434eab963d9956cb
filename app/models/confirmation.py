"""
Confirmation model
"""

import uuid
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.db import Base
from app.models.event import utcnow

def new_confirmation_id() -> str:
    return str(uuid.uuid4())

class Confirmation(Base):
    __tablename__ = "confirmations"

    id = Column(String(36), primary_key=True, default=new_confirmation_id)
    event_id = Column(String(100), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    guests = Column(Integer, nullable=False)  # includes the person confirming
    confirmed_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    event = relationship("Event", back_populates="confirmations")

    __table_args__ = (
        CheckConstraint("guests >= 1", name="ck_confirmations_guests_positive"),
    )
