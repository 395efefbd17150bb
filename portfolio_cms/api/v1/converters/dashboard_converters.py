"""Dashboard converters."""

from portfolio_cms.api.v1.converters.contact_converters import (
    convert_submission_to_response,
)
from portfolio_cms.api.v1.schemas.responses import DashboardResponse
from portfolio_cms.services.dashboard_service import DashboardData


def convert_dashboard_to_response(data: DashboardData) -> DashboardResponse:
    return DashboardResponse(
        counts=data.counts,
        submissions=data.submissions,
        unread_submissions=data.unread_submissions,
        recent_submissions=[
            convert_submission_to_response(item) for item in data.recent_submissions
        ],
    )
