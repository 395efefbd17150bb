"""Auth response schemas."""

from pydantic import BaseModel, Field


class AuthUserResponse(BaseModel):
    email: str


class SessionResponse(BaseModel):
    """Current admin session."""

    user: AuthUserResponse
    expires_in: int = Field(..., description="Token lifetime in seconds")


class LoginResponse(SessionResponse):
    access_token: str = Field(..., description="Signed session token")
    token_type: str = "bearer"
