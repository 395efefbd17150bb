"""
Auth API

Admin sign-in. The session token is returned in the body and set as an
HTTP-only cookie so both API clients and the admin pages can use it.
"""

from fastapi import APIRouter, Depends, Response

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.v1.converters import (
    convert_login_to_response,
    convert_session_to_response,
)
from portfolio_cms.api.v1.schemas.requests import LoginRequest
from portfolio_cms.api.v1.schemas.responses import LoginResponse, SessionResponse
from portfolio_cms.core.config import settings
from portfolio_cms.services.auth_service import AuthSession, get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, response: Response) -> LoginResponse:
    session = get_auth_service().login(request.email, request.password)
    response.set_cookie(
        settings.auth__cookie_name,
        session.token or "",
        max_age=session.expires_in,
        httponly=True,
        samesite="lax",
        secure=settings.environment == "production",
    )
    return convert_login_to_response(session)


@router.post("/logout", status_code=204)
def logout() -> Response:
    """
    Drop the session cookie.

    Tokens are stateless: a bearer token copied before logout stays valid
    until ``auth__token_max_age`` runs out. Rotate ``auth__secret_key`` to
    invalidate every issued token at once.
    """
    response = Response(status_code=204)
    response.delete_cookie(settings.auth__cookie_name)
    return response


@router.get("/session", response_model=SessionResponse)
def get_session(session: AuthSession = Depends(require_admin)) -> SessionResponse:
    """Current admin session; 401 when signed out."""
    return convert_session_to_response(session)


__all__ = ["router"]
