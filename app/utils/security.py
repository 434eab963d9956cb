"""
Admin authentication: shared-secret login, session marker cookie and the
routing rule that guards the admin pages.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Request, Response

from app.core.config import settings
from app.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

SESSION_MARKER_VALUE = "true"


class SharedSecretAuthenticator:
    """Verifies the single admin password and manages the session marker cookie"""

    def __init__(self, password: Optional[str], cookie_name: str, max_age: int, secure: bool):
        self.password = password
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    @property
    def configured(self) -> bool:
        return bool(self.password)

    def verify(self, candidate: str) -> bool:
        if not self.configured or not isinstance(candidate, str):
            return False
        return secrets.compare_digest(candidate.encode("utf-8"), self.password.encode("utf-8"))

    def issue(self, response: Response) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value=SESSION_MARKER_VALUE,
            max_age=self.max_age,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def revoke(self, response: Response) -> None:
        response.delete_cookie(
            key=self.cookie_name,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def is_authenticated(self, request: Request) -> bool:
        # Presence of the marker is trusted for its lifetime
        return self.cookie_name in request.cookies


def get_authenticator() -> SharedSecretAuthenticator:
    return SharedSecretAuthenticator(
        password=settings.ADMIN_PASSWORD,
        cookie_name=settings.AUTH_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE,
        secure=settings.is_production,
    )


def require_admin(
    request: Request,
    authenticator: SharedSecretAuthenticator = Depends(get_authenticator),
) -> bool:
    """Dependency guarding admin API operations"""
    if not authenticator.is_authenticated(request):
        raise UnauthorizedError()
    return True


def is_protected_path(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in settings.PROTECTED_PATHS)


def resolve_gate_redirect(path: str, authenticated: bool) -> Optional[str]:
    """
    Decide where a page request should be diverted, if anywhere.

    Unauthenticated requests for protected pages go to the login page;
    authenticated requests for the login page go to the admin landing page.
    Returns None when the request should pass through untouched.
    """
    if is_protected_path(path) and not authenticated:
        return settings.LOGIN_PATH
    if path == settings.LOGIN_PATH and authenticated:
        return settings.LANDING_PATH
    return None
