"""Public site response schemas."""

from pydantic import BaseModel, Field


class SiteDocumentResponse(BaseModel):
    """
    Synchronized document fragments for a client-rendered shell.

    ``head`` goes inside ``<head>``; ``body_start`` and ``body_end`` go
    before and after the page content.
    """

    title: str = Field(..., description="Document title")
    head: str = Field("", description="Head HTML")
    body_start: str = Field("", description="HTML placed before the page content")
    body_end: str = Field("", description="HTML placed after the page content")
