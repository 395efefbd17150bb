"""Media request schemas."""

from pydantic import BaseModel, Field


class MediaUpdateRequest(BaseModel):
    alt_text: str = Field("", max_length=512, description="Alternative text")
