"""Content request schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class ReorderRequest(BaseModel):
    """Move an item one position in display order."""

    direction: Literal["up", "down"] = Field(..., description="Direction to move")
