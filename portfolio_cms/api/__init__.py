"""
API Package

HTML pages and the JSON API of portfolio-cms.
"""

from .factory import create_api
from .router import router

__all__ = ["router", "create_api"]
