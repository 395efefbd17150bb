"""
API Endpoints Package

FastAPI endpoint definitions for portfolio-cms.
"""

from .admin_content import router as admin_content_router
from .admin_settings import router as admin_settings_router
from .auth import router as auth_router
from .contact import router as contact_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .media import router as media_router
from .site import router as site_router
from .submissions import router as submissions_router

__all__ = [
    "admin_content_router",
    "admin_settings_router",
    "auth_router",
    "contact_router",
    "dashboard_router",
    "health_router",
    "media_router",
    "site_router",
    "submissions_router",
]
