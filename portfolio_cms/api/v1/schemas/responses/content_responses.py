"""Content response schemas."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ContentListResponse(BaseModel):
    """Rows of one content collection."""

    collection: str = Field(..., description="Collection name", examples=["projects"])
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = Field(..., description="Number of items returned")
