"""Serialize in-memory documents to HTML for the page templates."""

from markupsafe import Markup, escape

from portfolio_cms.document.dom import (
    RAW_TEXT_ELEMENTS,
    VOID_ELEMENTS,
    Comment,
    Document,
    Element,
    Node,
    Text,
)

# Placeholder element that stands for the server-rendered page content
CONTENT_ID = "site-content"


def _render_attributes(element: Element) -> str:
    parts = []
    for name, value in element.attributes:
        if value is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


def render_node(node: Node) -> str:
    if isinstance(node, Text):
        parent = node.parent
        if parent is not None and parent.tag in RAW_TEXT_ELEMENTS:
            return node.data
        return str(escape(node.data))
    if isinstance(node, Comment):
        return f"<!--{node.data}-->"
    if isinstance(node, Element):
        opening = f"<{node.tag}{_render_attributes(node)}>"
        if node.tag in VOID_ELEMENTS:
            return opening
        inner = "".join(render_node(child) for child in node.children)
        return f"{opening}{inner}</{node.tag}>"
    return ""


def _render_children(children: list) -> Markup:
    return Markup("\n".join(render_node(child) for child in children))


def render_head(document: Document) -> Markup:
    """Inner HTML of ``<head>``."""
    return _render_children(document.head.children)


def render_body_start(document: Document) -> Markup:
    """Body nodes placed before the page content (the body-start container)."""
    return _render_children(_split_body(document)[0])


def render_body_end(document: Document) -> Markup:
    """Body nodes placed after the page content."""
    return _render_children(_split_body(document)[1])


def _split_body(document: Document):
    """
    Split ``<body>`` around the page content placeholder.

    Page templates render their own content between the two halves; nodes
    inserted at the start of the body come first, everything else after.
    """
    children = document.body.children
    marker = next(
        (
            index
            for index, child in enumerate(children)
            if isinstance(child, Element) and child.get_attribute("id") == CONTENT_ID
        ),
        None,
    )
    if marker is None:
        return [], list(children)
    return list(children[:marker]), list(children[marker + 1:])


def render_document(document: Document) -> str:
    """Whole page as a standalone HTML string."""
    return "<!DOCTYPE html>\n" + render_node(document.root)


__all__ = [
    "CONTENT_ID",
    "render_body_end",
    "render_body_start",
    "render_document",
    "render_head",
    "render_node",
]
