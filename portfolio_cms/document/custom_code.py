"""
Custom code injector.

Places the admin-supplied HTML for the three injection points into the
document and makes its scripts run. Each injection point owns one container
with a fixed id; applying again replaces that container instead of adding a
second one. Injected code is left in place for the lifetime of the page.
"""

from typing import Optional, Tuple

from portfolio_cms.core.logger import get_logger
from portfolio_cms.document.dom import ContainerPosition, Document, Element
from portfolio_cms.models.settings_blobs import CustomCodeSettings

logger = get_logger(__name__)

HEAD_CONTAINER_ID = "custom-head-code"
BODY_START_CONTAINER_ID = "custom-body-start-code"
BODY_END_CONTAINER_ID = "custom-body-end-code"

# (settings field, container id, position)
INJECTION_POINTS: Tuple[Tuple[str, str, ContainerPosition], ...] = (
    ("head_code", HEAD_CONTAINER_ID, "head_end"),
    ("body_start_code", BODY_START_CONTAINER_ID, "body_start"),
    ("body_end_code", BODY_END_CONTAINER_ID, "body_end"),
)


class CustomCodeInjector:
    """Injects custom code blobs into a document."""

    def __init__(self, document: Document) -> None:
        self.document = document

    def apply(self, code: Optional[CustomCodeSettings]) -> None:
        if code is None:
            return

        for field, container_id, position in INJECTION_POINTS:
            html = getattr(code, field)
            container = self.document.replace_container(container_id, position, html)
            if container is not None:
                count = self._activate_scripts(container)
                logger.debug(
                    "Injected %s (%d chars, %d scripts)", field, len(html), count
                )

    def _activate_scripts(self, container: Element) -> int:
        """
        Swap every parsed script for a freshly created copy.

        Parsed scripts never run; the copy keeps the attributes in their
        original order plus the script text, and runs when it is connected.
        """
        scripts = container.find_all("script")
        for old_script in scripts:
            new_script = self.document.create_element("script")
            for name, value in old_script.attributes:
                new_script.set_attribute(name, value)
            new_script.text_content = old_script.text_content
            old_script.parent.replace_child(new_script, old_script)
        return len(scripts)


__all__ = [
    "BODY_END_CONTAINER_ID",
    "BODY_START_CONTAINER_ID",
    "CustomCodeInjector",
    "HEAD_CONTAINER_ID",
    "INJECTION_POINTS",
]
