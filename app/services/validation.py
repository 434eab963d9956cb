"""
Input validation rules shared by every entry point that accepts the field
"""

import re
from typing import Any

from app.core.errors import InvalidInputError

EVENT_ID_PATTERN = re.compile(r"[a-z0-9-]+")
CONFIRMATION_ID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# Upper bound of the 32-bit guests column
MAX_GUESTS = 2_147_483_647
_GUESTS_TOO_MANY = f"The number of guests must be at most {MAX_GUESTS}."


def require_text(value: Any, field: str, message: str) -> str:
    """Return the trimmed string, or raise if it is missing or blank"""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(message, field=field)
    return value.strip()


def validate_event_id(value: Any) -> str:
    """Return the id unchanged; surrounding whitespace is not a slug character"""
    require_text(value, "eventId", "Event id is required.")
    if not EVENT_ID_PATTERN.fullmatch(value):
        raise InvalidInputError(
            "Invalid event id. Use only lowercase letters, numbers and hyphens.",
            field="eventId",
        )
    return value


def validate_event_name(value: Any) -> str:
    return require_text(value, "name", "Event name is required.")


def validate_event_date(value: Any) -> str:
    return require_text(value, "date", "Event date is required.")


def validate_confirmation_name(value: Any) -> str:
    return require_text(value, "name", "Name is required.")


def parse_guests(value: Any) -> int:
    """
    Parse a guest count.

    Accepts integers, integral floats and strings holding a decimal integer.
    The count includes the person confirming, so it must be at least 1,
    and it must fit the 32-bit guests column.
    """
    guests = None
    if isinstance(value, bool):
        guests = None
    elif isinstance(value, int):
        guests = value
    elif isinstance(value, float) and value.is_integer():
        guests = int(value)
    elif isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        text = value.strip()
        digits = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) > len(str(MAX_GUESTS)):
            raise InvalidInputError(_GUESTS_TOO_MANY, field="guests")
        guests = -int(digits) if text.startswith("-") else int(digits)

    if guests is None or guests < 1:
        raise InvalidInputError("The number of guests must be at least 1.", field="guests")
    if guests > MAX_GUESTS:
        raise InvalidInputError(_GUESTS_TOO_MANY, field="guests")
    return guests


def validate_confirmation_id(value: Any) -> str:
    confirmation_id = require_text(value, "id", "Confirmation id is required.")
    if not CONFIRMATION_ID_PATTERN.fullmatch(confirmation_id):
        raise InvalidInputError("Invalid confirmation id.", field="id")
    return confirmation_id.lower()
