"""Favicon synchronizer."""

from typing import Optional

from portfolio_cms.core.logger import get_logger
from portfolio_cms.document.dom import DocumentSink

logger = get_logger(__name__)


class FaviconSynchronizer:
    """
    Points the page icons at the configured favicon.

    Every existing icon link is dropped and exactly one ``rel="icon"`` and one
    ``rel="apple-touch-icon"`` link are written, so repeated application never
    duplicates them. The URL is not checked.
    """

    def __init__(self, sink: DocumentSink) -> None:
        self.sink = sink

    def apply(self, favicon_url: Optional[str]) -> None:
        if not favicon_url:
            return
        self.sink.set_favicon(favicon_url)
        logger.debug("Favicon set to %s", favicon_url)


__all__ = ["FaviconSynchronizer"]
