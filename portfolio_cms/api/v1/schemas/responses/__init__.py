"""
V1 API Response Schemas

Response schemas for all API v1 endpoints.
"""

from .auth_responses import AuthUserResponse, LoginResponse, SessionResponse
from .contact_responses import (
    ContactSubmissionAccepted,
    ContactSubmissionListResponse,
    ContactSubmissionResponse,
)
from .content_responses import ContentListResponse
from .dashboard_responses import DashboardResponse
from .health_response import ComponentHealth, HealthResponse
from .media_responses import FaviconUploadResponse
from .settings_responses import SettingResponse, SettingsListResponse
from .site_responses import SiteDocumentResponse

__all__ = [
    "AuthUserResponse",
    "ComponentHealth",
    "ContactSubmissionAccepted",
    "ContactSubmissionListResponse",
    "ContactSubmissionResponse",
    "ContentListResponse",
    "DashboardResponse",
    "FaviconUploadResponse",
    "HealthResponse",
    "LoginResponse",
    "SessionResponse",
    "SettingResponse",
    "SettingsListResponse",
    "SiteDocumentResponse",
]
