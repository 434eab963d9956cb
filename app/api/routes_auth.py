"""
Admin login/logout routes
"""

import logging
from typing import Any, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from app.core.config import settings
from app.core.errors import InternalError, InvalidInputError
from app.utils.security import SharedSecretAuthenticator, get_authenticator

logger = logging.getLogger(__name__)

router = APIRouter()

class LoginRequest(BaseModel):
    """Admin login request"""
    password: Optional[Any] = None

@router.post("/login")
async def login(
    payload: LoginRequest,
    authenticator: SharedSecretAuthenticator = Depends(get_authenticator)
):
    """Exchange the admin password for a session marker cookie"""
    if not authenticator.configured:
        logger.error("ADMIN_PASSWORD is not set; admin login is unavailable")
        raise InternalError("Server configuration incomplete.")

    if not payload.password:
        raise InvalidInputError("Password is required.", field="password")

    if not authenticator.verify(payload.password):
        logger.warning("Rejected admin login attempt")
        return RedirectResponse(url=f"{settings.LOGIN_PATH}?error=invalid", status_code=302)

    response = RedirectResponse(url=settings.LANDING_PATH, status_code=302)
    authenticator.issue(response)
    logger.info("Admin session started")
    return response

@router.post("/logout")
async def logout(authenticator: SharedSecretAuthenticator = Depends(get_authenticator)):
    """Clear the session marker cookie"""
    response = RedirectResponse(url=settings.LOGIN_PATH, status_code=302)
    authenticator.revoke(response)
    return response
