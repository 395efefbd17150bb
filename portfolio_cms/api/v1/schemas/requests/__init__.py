"""
V1 API Request Schemas

Request schemas for all API v1 endpoints.
"""

from .auth_requests import LoginRequest
from .contact_requests import ContactSubmissionRequest
from .content_requests import ReorderRequest
from .media_requests import MediaUpdateRequest
from .settings_requests import SettingUpdateRequest

__all__ = [
    "ContactSubmissionRequest",
    "LoginRequest",
    "MediaUpdateRequest",
    "ReorderRequest",
    "SettingUpdateRequest",
]
