"""
V1 API Schemas Package

Pydantic models for API request and response data.
"""

from .requests import (
    ContactSubmissionRequest,
    LoginRequest,
    MediaUpdateRequest,
    ReorderRequest,
    SettingUpdateRequest,
)
from .responses import (
    ContactSubmissionResponse,
    ContentListResponse,
    DashboardResponse,
    HealthResponse,
    LoginResponse,
    SessionResponse,
    SettingResponse,
    SiteDocumentResponse,
)

__all__ = [
    "ContactSubmissionRequest",
    "ContactSubmissionResponse",
    "ContentListResponse",
    "DashboardResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MediaUpdateRequest",
    "ReorderRequest",
    "SessionResponse",
    "SettingResponse",
    "SettingUpdateRequest",
    "SiteDocumentResponse",
]
