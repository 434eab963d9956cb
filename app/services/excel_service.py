"""
Spreadsheet export of an event's confirmation list
"""

import io
from typing import List
import pandas as pd

from app.models import Confirmation, Event

class ExcelService:
    """Service for handling Excel operations"""

    COLUMNS = ['Name', 'Guests', 'Confirmed At']

    @staticmethod
    def export_confirmations(event: Event, confirmations: List[Confirmation]) -> bytes:
        """Export an event's confirmations, newest first, with a total row"""
        data = []
        for confirmation in confirmations:
            confirmed_at = confirmation.confirmed_at
            # Excel cannot store timezone-aware datetimes
            if confirmed_at is not None and confirmed_at.tzinfo is not None:
                confirmed_at = confirmed_at.replace(tzinfo=None)
            data.append({
                'Name': confirmation.name,
                'Guests': confirmation.guests,
                'Confirmed At': confirmed_at,
            })

        df = pd.DataFrame(data, columns=ExcelService.COLUMNS)
        df.loc[len(df)] = ['Total', int(sum(c.guests for c in confirmations)), None]

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name=ExcelService.sheet_name(event))

        return buffer.getvalue()

    @staticmethod
    def sheet_name(event: Event) -> str:
        # Excel caps sheet names at 31 characters
        return event.id[:31]
