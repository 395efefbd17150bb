"""
API Dependencies

Shared FastAPI dependencies.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_cms.core.config import settings
from portfolio_cms.services.auth_service import AuthSession, get_auth_service

bearer_scheme = HTTPBearer(auto_error=False)


def session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Token from the ``Authorization: Bearer`` header, else the session cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.auth__cookie_name)


def require_admin(token: Optional[str] = Depends(session_token)) -> AuthSession:
    """
    Current admin session.

    Raises:
        AuthException: Without a valid token, rendered as a 401 ``ErrorResponse``
    """
    return get_auth_service().resolve_session(token)


__all__ = ["require_admin", "session_token"]
