"""
Admin event API routes - requires authentication
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.event import EventCreate, EventDetails
from app.services.excel_service import ExcelService
from app.services.repositories import EventRepo
from app.utils.security import require_admin
from app.utils.responses import message_response

router = APIRouter()

@router.post("")
async def create_event(
    payload: EventCreate,
    db: Session = Depends(get_db),
    admin: bool = Depends(require_admin)
):
    """Create a new event"""
    event = EventRepo.create(db, event_id=payload.eventId, name=payload.name, date=payload.date)

    return message_response(
        message="Event created successfully!",
        status_code=201,
        eventId=event.id,
        event=EventDetails.model_validate(event)
    )

@router.delete("")
async def delete_event(
    eventId: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    admin: bool = Depends(require_admin)
):
    """Delete an event together with all of its confirmations"""
    EventRepo.delete(db, eventId)

    return message_response(message="Event and its confirmations were deleted successfully!")

@router.get("/{event_id}/export.xlsx")
async def export_confirmations(
    event_id: str,
    db: Session = Depends(get_db),
    admin: bool = Depends(require_admin)
):
    """Download the event's confirmation list as a spreadsheet"""
    result = EventRepo.get_with_confirmations(db, event_id)

    excel_content = ExcelService.export_confirmations(result.event, result.confirmations)

    return Response(
        content=excel_content,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f"attachment; filename=confirmations_{result.event.id}.xlsx"}
    )
