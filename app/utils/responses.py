"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.schemas.common import DataResponse, ErrorResponse, MessageResponse

def message_response(message: str, status_code: int = 200, **extra: Any) -> JSONResponse:
    """Create a response carrying a message and any extra top-level fields"""
    content = MessageResponse(message=message).model_dump()
    content.update(extra)
    return JSONResponse(
        content=jsonable_encoder(content),
        status_code=status_code
    )

def data_response(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    """Create a response carrying a message and the affected record"""
    response = DataResponse(message=message, data=data)
    return JSONResponse(
        content=jsonable_encoder(response),
        status_code=status_code
    )

def error_response(message: Optional[str], status_code: int = 400) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(message=message or "Internal server error.")
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )
