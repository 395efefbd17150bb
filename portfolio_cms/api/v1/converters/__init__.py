"""
API Layer Converters

Converters between API layer schemas and service layer schemas.
"""

from .auth_converters import convert_login_to_response, convert_session_to_response
from .contact_converters import (
    convert_contact_request,
    convert_submission_to_response,
    convert_submissions_to_response,
)
from .dashboard_converters import convert_dashboard_to_response
from .settings_converters import (
    convert_setting_to_response,
    convert_settings_to_response,
)

__all__ = [
    "convert_contact_request",
    "convert_dashboard_to_response",
    "convert_login_to_response",
    "convert_session_to_response",
    "convert_setting_to_response",
    "convert_settings_to_response",
    "convert_submission_to_response",
    "convert_submissions_to_response",
]
