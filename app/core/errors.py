"""
Application error types

Every failure a request can end in is one of these. Route handlers let them
propagate; the handlers registered in main.py turn them into
``{"message": ...}`` JSON bodies with the matching status code.
"""

from typing import Optional


class AppError(Exception):
    """Base application error carrying the HTTP status it maps to"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInputError(AppError):
    """Malformed or missing required field"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class NotFoundError(AppError):
    """Referenced event, or confirmation within an event, does not exist"""

    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation on event creation"""

    status_code = 409


class UnauthorizedError(AppError):
    """Missing session marker on a protected operation"""

    status_code = 401

    def __init__(self, message: str = "Authentication required."):
        super().__init__(message)


class InternalError(AppError):
    """Storage or server failure; message stays generic"""

    status_code = 500

    def __init__(self, message: str = "Internal server error."):
        super().__init__(message)
