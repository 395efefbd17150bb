"""Media response schemas."""

from pydantic import BaseModel, Field


class FaviconUploadResponse(BaseModel):
    favicon_url: str = Field(..., description="Public URL of the uploaded favicon")
