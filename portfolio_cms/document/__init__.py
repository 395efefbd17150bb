"""
Document Package

In-memory page documents and the synchronizers that write SEO tags, favicon
links and custom code into them before rendering.
"""

from .custom_code import CustomCodeInjector
from .dom import Document, DocumentSink, Element, Text, parse_fragment
from .favicon import FaviconSynchronizer
from .render import render_body_end, render_body_start, render_head, render_node
from .sections import resolve_sections, visible_sections
from .seo import SeoSynchronizer

__all__ = [
    "CustomCodeInjector",
    "Document",
    "DocumentSink",
    "Element",
    "FaviconSynchronizer",
    "SeoSynchronizer",
    "Text",
    "parse_fragment",
    "render_body_end",
    "render_body_start",
    "render_head",
    "render_node",
    "resolve_sections",
    "visible_sections",
]
