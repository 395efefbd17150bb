"""
API Version 1 Package

Version 1 of the portfolio-cms API endpoints.
"""

from fastapi import APIRouter

from .endpoints import (
    admin_content_router,
    admin_settings_router,
    auth_router,
    contact_router,
    dashboard_router,
    health_router,
    media_router,
    site_router,
    submissions_router,
)

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(site_router)
router.include_router(contact_router)
router.include_router(auth_router)
router.include_router(admin_settings_router)
router.include_router(admin_content_router)
router.include_router(submissions_router)
router.include_router(media_router)
router.include_router(dashboard_router)

__all__ = ["router"]
