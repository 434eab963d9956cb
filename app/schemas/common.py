"""
Common Pydantic schemas
"""

from typing import Any, Optional
from pydantic import BaseModel

class MessageResponse(BaseModel):
    """Message-only API response"""
    message: str

class DataResponse(MessageResponse):
    """Message plus the affected record"""
    data: Optional[Any] = None

class ErrorResponse(BaseModel):
    """Error response schema"""
    message: str
