"""Auth request schemas."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, description="Admin email")
    password: str = Field(..., min_length=1, description="Admin password")
