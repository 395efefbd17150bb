"""Admin Dashboard API."""

from fastapi import APIRouter, Depends

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.v1.converters import convert_dashboard_to_response
from portfolio_cms.api.v1.schemas.responses import DashboardResponse
from portfolio_cms.services.dashboard_service import DashboardService

router = APIRouter(
    prefix="/admin/dashboard",
    tags=["admin-dashboard"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=DashboardResponse)
def get_dashboard() -> DashboardResponse:
    """Content counts and the latest contact submissions."""
    return convert_dashboard_to_response(DashboardService().get_dashboard())


__all__ = ["router"]
