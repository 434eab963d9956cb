"""
QR code generation for an event's confirmation link
"""

import io
import qrcode

from app.core.config import settings

class QRService:
    """Service for generating QR codes"""

    @staticmethod
    def get_confirmation_url(event_id: str) -> str:
        """The public page attendees use to confirm"""
        return f"{settings.BASE_URL.rstrip('/')}/confirm/{event_id}"

    @staticmethod
    def generate_event_qr(event_id: str, format: str = 'PNG') -> bytes:
        """Generate a QR code pointing at the event's confirmation page"""
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=4,
        )
        qr.add_data(QRService.get_confirmation_url(event_id))
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buffer = io.BytesIO()
        img.save(buffer, format=format)

        return buffer.getvalue()
