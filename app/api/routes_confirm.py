"""
Confirmation API routes

Submitting a confirmation and reading an event's public details are open to
anyone holding the event link; everything else requires the admin session.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.confirmation import ConfirmationCreate, ConfirmationUpdate, ConfirmationResponse
from app.schemas.event import EventAttendance, EventDetails, EventSummary
from app.services.repositories import ConfirmationRepo, EventRepo
from app.utils.security import SharedSecretAuthenticator, get_authenticator, require_admin
from app.utils.responses import data_response, message_response
from app.core.errors import UnauthorizedError

router = APIRouter()

@router.get("")
async def get_confirmations(
    request: Request,
    eventId: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    authenticator: SharedSecretAuthenticator = Depends(get_authenticator)
):
    """List events, or fetch one event with its confirmations"""
    is_admin = authenticator.is_authenticated(request)

    if eventId is None:
        if not is_admin:
            raise UnauthorizedError()
        events = EventRepo.list_all(db)
        return [EventSummary.model_validate(event) for event in events]

    if not is_admin:
        event = EventRepo.get(db, eventId)
        return {"details": EventDetails.model_validate(event)}

    result = EventRepo.get_with_confirmations(db, eventId)
    return EventAttendance(
        details=EventDetails.model_validate(result.event),
        confirmations=[ConfirmationResponse.model_validate(c) for c in result.confirmations],
        total_guests=result.total_guests
    )

@router.post("")
async def create_confirmation(
    payload: ConfirmationCreate,
    db: Session = Depends(get_db)
):
    """Public RSVP submission"""
    confirmation = ConfirmationRepo.create(
        db,
        event_id=payload.eventId,
        name=payload.name,
        guests=payload.guests
    )

    return data_response(
        message="Confirmation received!",
        data=ConfirmationResponse.model_validate(confirmation),
        status_code=201
    )

@router.put("")
async def update_confirmation(
    payload: ConfirmationUpdate,
    eventId: Optional[str] = Query(None),
    id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    admin: bool = Depends(require_admin)
):
    """Edit the name and guest count of a confirmation"""
    confirmation = ConfirmationRepo.update(
        db,
        event_id=eventId,
        confirmation_id=id,
        name=payload.name,
        guests=payload.guests
    )

    return data_response(
        message="Confirmation updated successfully.",
        data=ConfirmationResponse.model_validate(confirmation)
    )

@router.delete("")
async def delete_confirmation(
    eventId: Optional[str] = Query(None),
    id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    admin: bool = Depends(require_admin)
):
    """Delete one confirmation of an event"""
    ConfirmationRepo.delete(db, event_id=eventId, confirmation_id=id)

    return message_response(message="Confirmation deleted successfully.")
