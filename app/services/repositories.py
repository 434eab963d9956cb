"""
Repository layer: validated data-access operations for events and confirmations.

Every operation is one transaction. Validation failures, missing rows and
duplicate ids are raised as the typed errors in app.core.errors; anything
the database itself raises is rolled back and left to propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.models import Confirmation, Event
from app.services import validation

logger = logging.getLogger(__name__)


@dataclass
class EventWithConfirmations:
    event: Event
    confirmations: List[Confirmation]

    @property
    def total_guests(self) -> int:
        return sum(c.guests for c in self.confirmations)


# -------- Event repository --------

class EventRepo:
    @staticmethod
    def list_all(db: Session) -> List[Event]:
        return db.query(Event).order_by(Event.created_at.desc()).all()

    @staticmethod
    def create(db: Session, event_id: Any, name: Any, date: Any) -> Event:
        event_id = validation.validate_event_id(event_id)
        name = validation.validate_event_name(name)
        date = validation.validate_event_date(date)

        if db.get(Event, event_id) is not None:
            raise ConflictError(f'The event id "{event_id}" already exists.')

        event = Event(id=event_id, name=name, date=date)
        db.add(event)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError(f'The event id "{event_id}" already exists.')
        except Exception:
            db.rollback()
            raise
        db.refresh(event)
        logger.info("Created event %s", event_id)
        return event

    @staticmethod
    def get(db: Session, event_id: Any) -> Event:
        event_id = validation.require_text(event_id, "eventId", "Event id is required.")
        event = db.query(Event).filter(Event.id == event_id).first()
        if not event:
            raise NotFoundError("Event not found.")
        return event

    @staticmethod
    def get_with_confirmations(db: Session, event_id: Any) -> EventWithConfirmations:
        event = EventRepo.get(db, event_id)
        confirmations = (
            db.query(Confirmation)
            .filter(Confirmation.event_id == event.id)
            .order_by(Confirmation.confirmed_at.desc())
            .all()
        )
        return EventWithConfirmations(event=event, confirmations=confirmations)

    @staticmethod
    def delete(db: Session, event_id: Any) -> None:
        """Delete an event and all of its confirmations in one transaction"""
        event_id = validation.require_text(event_id, "eventId", "Event id is required.")
        try:
            # Explicit child delete keeps the cascade atomic even where the
            # engine does not enforce ON DELETE CASCADE.
            removed = (
                db.query(Confirmation)
                .filter(Confirmation.event_id == event_id)
                .delete(synchronize_session=False)
            )
            deleted = db.query(Event).filter(Event.id == event_id).delete(synchronize_session=False)
            if deleted == 0:
                db.rollback()
                raise NotFoundError(f'Event with id "{event_id}" not found.')
            db.commit()
        except NotFoundError:
            raise
        except Exception:
            db.rollback()
            raise
        logger.info("Deleted event %s with %d confirmations", event_id, removed)


# -------- Confirmation repository --------

class ConfirmationRepo:
    @staticmethod
    def _find(db: Session, event_id: str, confirmation_id: str) -> Confirmation | None:
        # Always scoped by both ids so one event can never reach another's rows
        return db.query(Confirmation).filter(
            Confirmation.id == confirmation_id,
            Confirmation.event_id == event_id,
        ).first()

    @staticmethod
    def get(db: Session, event_id: Any, confirmation_id: Any) -> Confirmation:
        event_id = validation.validate_event_id(event_id)
        confirmation_id = validation.validate_confirmation_id(confirmation_id)
        confirmation = ConfirmationRepo._find(db, event_id, confirmation_id)
        if not confirmation:
            raise NotFoundError("Confirmation not found for this event.")
        return confirmation

    @staticmethod
    def create(db: Session, event_id: Any, name: Any, guests: Any) -> Confirmation:
        event_id = validation.validate_event_id(event_id)
        name = validation.validate_confirmation_name(name)
        guests = validation.parse_guests(guests)

        if not db.query(Event.id).filter(Event.id == event_id).first():
            raise NotFoundError("Event not found.")

        confirmation = Confirmation(event_id=event_id, name=name, guests=guests)
        db.add(confirmation)
        try:
            db.commit()
        except IntegrityError:
            # The event was deleted between the lookup and the insert
            db.rollback()
            raise NotFoundError("Event not found.")
        except Exception:
            db.rollback()
            raise
        db.refresh(confirmation)
        logger.info("Confirmation %s recorded for event %s (%d guests)", confirmation.id, event_id, guests)
        return confirmation

    @staticmethod
    def update(db: Session, event_id: Any, confirmation_id: Any, name: Any, guests: Any) -> Confirmation:
        event_id = validation.validate_event_id(event_id)
        confirmation_id = validation.validate_confirmation_id(confirmation_id)
        name = validation.validate_confirmation_name(name)
        guests = validation.parse_guests(guests)

        confirmation = ConfirmationRepo._find(db, event_id, confirmation_id)
        if not confirmation:
            raise NotFoundError("Confirmation not found for this event.")

        confirmation.name = name
        confirmation.guests = guests
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(confirmation)
        return confirmation

    @staticmethod
    def delete(db: Session, event_id: Any, confirmation_id: Any) -> None:
        event_id = validation.validate_event_id(event_id)
        confirmation_id = validation.validate_confirmation_id(confirmation_id)
        try:
            deleted = db.query(Confirmation).filter(
                Confirmation.id == confirmation_id,
                Confirmation.event_id == event_id,
            ).delete(synchronize_session=False)
            if deleted == 0:
                db.rollback()
                raise NotFoundError("Confirmation not found for this event.")
            db.commit()
        except NotFoundError:
            raise
        except Exception:
            db.rollback()
            raise
        logger.info("Deleted confirmation %s from event %s", confirmation_id, event_id)
