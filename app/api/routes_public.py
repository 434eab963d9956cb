"""
Public routes - no authentication required
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.services.qr_service import QRService
from app.services.repositories import EventRepo

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/events/{event_id}/qr.png")
async def get_qr_code(
    event_id: str,
    db: Session = Depends(get_db)
):
    """QR code image of the event's confirmation link"""
    event = EventRepo.get(db, event_id)

    qr_bytes = QRService.generate_event_qr(event.id)

    return Response(
        content=qr_bytes,
        media_type="image/png",
        headers={"Content-Disposition": f"inline; filename=qr_{event.id}.png"}
    )
