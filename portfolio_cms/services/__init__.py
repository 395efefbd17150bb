"""
Services Package

Business logic between the API layer and the stores.
"""

from .auth_service import AuthService, AuthSession, AuthUser, get_auth_service
from .contact_service import ContactService, ContactSubmissionData
from .content_service import ContentService, generate_slug
from .dashboard_service import DashboardData, DashboardService
from .homepage_service import HomepageData, HomepageService
from .media_service import MediaService
from .settings_service import SettingData, SettingsService
from .site_document_service import SiteDocumentService

__all__ = [
    "AuthService",
    "AuthSession",
    "AuthUser",
    "ContactService",
    "ContactSubmissionData",
    "ContentService",
    "DashboardData",
    "DashboardService",
    "HomepageData",
    "HomepageService",
    "MediaService",
    "SettingData",
    "SettingsService",
    "SiteDocumentService",
    "generate_slug",
    "get_auth_service",
]
