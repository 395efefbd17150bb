"""Auth converters."""

from portfolio_cms.api.v1.schemas.responses import (
    AuthUserResponse,
    LoginResponse,
    SessionResponse,
)
from portfolio_cms.services.auth_service import AuthSession


def convert_session_to_response(session: AuthSession) -> SessionResponse:
    return SessionResponse(
        user=AuthUserResponse(email=session.user.email),
        expires_in=session.expires_in,
    )


def convert_login_to_response(session: AuthSession) -> LoginResponse:
    """Convert a freshly opened session, token included."""
    return LoginResponse(
        user=AuthUserResponse(email=session.user.email),
        expires_in=session.expires_in,
        access_token=session.token or "",
    )
