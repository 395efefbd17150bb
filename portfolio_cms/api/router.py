"""
FastAPI router for the portfolio-cms API.

HTML pages are served at the root; the JSON API lives under ``/api/v1``.
"""

from fastapi import APIRouter

from portfolio_cms.api.pages import router as pages_router
from portfolio_cms.api.v1 import router as v1_router

router = APIRouter()
router.include_router(pages_router)
router.include_router(v1_router, prefix="/api/v1")

__all__ = ["router"]
