"""
In-memory document model.

A small DOM used to assemble every public page before it is rendered to HTML.
The head/body synchronizers (SEO, favicon, custom code) mutate a ``Document``
through the ``DocumentSink`` protocol, so they can run against the real page
or against a test double.

Script semantics follow the browser: a ``<script>`` created by fragment
parsing (``set_inner_html``) is inert, while a script built with
``Document.create_element`` runs the moment it becomes connected to the
document. "Running" means it is appended to ``Document.executed_scripts`` and
handed to ``Document.script_runner`` when one is installed.
"""

from __future__ import annotations

from html.parser import HTMLParser
from typing import (
    Callable,
    Iterator,
    List,
    Literal,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

ContainerPosition = Literal["head_end", "body_start", "body_end"]
Attribute = Tuple[str, Optional[str]]


class Node:
    """Base class of everything that can sit in the tree."""

    def __init__(self) -> None:
        self.parent: Optional[Element] = None

    @property
    def owner_document(self) -> Optional["Document"]:
        node: Node = self
        while node.parent is not None:
            node = node.parent
        return getattr(node, "_document", None)

    @property
    def is_connected(self) -> bool:
        return self.owner_document is not None

    def remove(self) -> None:
        """Detach this node from its parent, if any."""
        if self.parent is not None:
            self.parent.remove_child(self)

    @property
    def text_content(self) -> str:
        return ""


class Text(Node):
    def __init__(self, data: str) -> None:
        super().__init__()
        self.data = data

    @property
    def text_content(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


class Comment(Node):
    def __init__(self, data: str) -> None:
        super().__init__()
        self.data = data

    def __repr__(self) -> str:
        return f"Comment({self.data!r})"


class Element(Node):
    """Element with ordered attributes and children."""

    def __init__(
        self, tag: str, attributes: Optional[List[Attribute]] = None
    ) -> None:
        super().__init__()
        self.tag = tag.lower()
        self.attributes: List[Attribute] = list(attributes or [])
        self.children: List[Node] = []
        # Browser "already started" flag: parsed scripts never run
        self.already_started = False

    def __repr__(self) -> str:
        return f"<Element {self.tag} {self.attributes!r}>"

    # Attributes

    def get_attribute(self, name: str) -> Optional[str]:
        name = name.lower()
        for key, value in self.attributes:
            if key == name:
                return "" if value is None else value
        return None

    def has_attribute(self, name: str) -> bool:
        name = name.lower()
        return any(key == name for key, _ in self.attributes)

    def set_attribute(self, name: str, value: Optional[str]) -> None:
        """Set an attribute, keeping its position when it already exists."""
        name = name.lower()
        for index, (key, _) in enumerate(self.attributes):
            if key == name:
                self.attributes[index] = (name, value)
                return
        self.attributes.append((name, value))

    def remove_attribute(self, name: str) -> None:
        name = name.lower()
        self.attributes = [(k, v) for k, v in self.attributes if k != name]

    @property
    def id(self) -> Optional[str]:
        return self.get_attribute("id")

    # Tree mutation

    def _adopt(self, node: Node) -> None:
        if node is self or node in self.ancestors():
            raise ValueError("Cannot insert a node into itself")
        node.remove()
        node.parent = self

    def append_child(self, node: Node) -> Node:
        self._adopt(node)
        self.children.append(node)
        _notify_connected(node)
        return node

    def insert_before(self, node: Node, reference: Optional[Node]) -> Node:
        """Insert ``node`` before ``reference``; append when reference is None."""
        if reference is None:
            return self.append_child(node)
        if reference.parent is not self:
            raise ValueError("Reference node is not a child of this element")
        self._adopt(node)
        self.children.insert(self.children.index(reference), node)
        _notify_connected(node)
        return node

    def remove_child(self, node: Node) -> Node:
        self.children.remove(node)
        node.parent = None
        return node

    def replace_child(self, new: Node, old: Node) -> Node:
        """Put ``new`` where ``old`` was and detach ``old``."""
        if old.parent is not self:
            raise ValueError("Node to replace is not a child of this element")
        self.insert_before(new, old)
        self.remove_child(old)
        return old

    @property
    def first_child(self) -> Optional[Node]:
        return self.children[0] if self.children else None

    # Traversal

    def ancestors(self) -> Iterator["Element"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def iter(self, tag: Optional[str] = None) -> Iterator["Element"]:
        """Descendant elements in document order, optionally filtered by tag."""
        for child in list(self.children):
            if isinstance(child, Element):
                if tag is None or child.tag == tag:
                    yield child
                yield from child.iter(tag)

    def find_all(self, tag: str) -> List["Element"]:
        return list(self.iter(tag))

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, value: str) -> None:
        for child in list(self.children):
            self.remove_child(child)
        if value:
            self.append_child(Text(value))

    def set_inner_html(self, html: str) -> None:
        """Replace the children with the parsed fragment; parsed scripts stay inert."""
        for child in list(self.children):
            self.remove_child(child)
        for node in parse_fragment(html):
            self.append_child(node)


def _notify_connected(node: Node) -> None:
    document = node.owner_document
    if document is None:
        return
    if isinstance(node, Element):
        scripts = [node] if node.tag == "script" else []
        scripts.extend(node.iter("script"))
        for script in scripts:
            document._prepare_script(script)


class _FragmentBuilder(HTMLParser):
    """Builds detached nodes from an HTML fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.roots: List[Node] = []
        self._stack: List[Element] = []

    def _attach(self, node: Node) -> None:
        if self._stack:
            parent = self._stack[-1]
            node.parent = parent
            parent.children.append(node)
        else:
            self.roots.append(node)

    def _element(self, tag: str, attrs: List[Attribute]) -> Element:
        element = Element(tag, [(name.lower(), value) for name, value in attrs])
        if element.tag == "script":
            element.already_started = True
        self._attach(element)
        return element

    def handle_starttag(self, tag: str, attrs: List[Attribute]) -> None:
        element = self._element(tag, attrs)
        if element.tag not in VOID_ELEMENTS:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: List[Attribute]) -> None:
        self._element(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._attach(Text(data))

    def handle_comment(self, data: str) -> None:
        self._attach(Comment(data))


def parse_fragment(html: str) -> List[Node]:
    """Parse an HTML fragment into detached top-level nodes."""
    builder = _FragmentBuilder()
    builder.feed(html or "")
    builder.close()
    return builder.roots


@runtime_checkable
class DocumentSink(Protocol):
    """Operations the head/body synchronizers perform on a page."""

    def set_title(self, title: str) -> None: ...

    def upsert_meta(self, attribute: str, key: str, content: str) -> None: ...

    def replace_container(
        self, container_id: str, position: ContainerPosition, html: Optional[str]
    ) -> Optional[Element]: ...

    def set_favicon(self, url: str) -> None: ...


class Document:
    """A page: ``<html>`` with a ``<head>`` and a ``<body>``."""

    def __init__(
        self,
        title: str = "",
        script_runner: Optional[Callable[[Element], None]] = None,
    ) -> None:
        self.root = Element("html")
        self.root._document = self  # type: ignore[attr-defined]
        self.head = Element("head")
        self.body = Element("body")
        self.root.append_child(self.head)
        self.root.append_child(self.body)
        self.executed_scripts: List[Element] = []
        self.script_runner = script_runner
        if title:
            self.title = title

    def create_element(self, tag: str) -> Element:
        """New detached element; scripts created here run once connected."""
        return Element(tag)

    def _prepare_script(self, script: Element) -> None:
        if script.already_started:
            return
        script.already_started = True
        self.executed_scripts.append(script)
        if self.script_runner is not None:
            self.script_runner(script)

    # Queries

    def iter(self, tag: Optional[str] = None) -> Iterator[Element]:
        return self.root.iter(tag)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        for element in self.root.iter():
            if element.get_attribute("id") == element_id:
                return element
        return None

    def query_meta(self, attribute: str, key: str) -> Optional[Element]:
        """First ``<meta>`` in the head whose ``attribute`` equals ``key``."""
        for meta in self.head.iter("meta"):
            if meta.get_attribute(attribute) == key:
                return meta
        return None

    def query_links(self, rel_contains: str) -> List[Element]:
        """Every ``<link>`` whose ``rel`` contains ``rel_contains``."""
        return [
            link
            for link in self.root.iter("link")
            if rel_contains in (link.get_attribute("rel") or "")
        ]

    # Title

    @property
    def title(self) -> str:
        element = next(self.head.iter("title"), None)
        return element.text_content.strip() if element is not None else ""

    @title.setter
    def title(self, value: str) -> None:
        element = next(self.head.iter("title"), None)
        if element is None:
            element = self.create_element("title")
            self.head.insert_before(element, self.head.first_child)
        element.text_content = value

    # DocumentSink

    def set_title(self, title: str) -> None:
        self.title = title

    def upsert_meta(self, attribute: str, key: str, content: str) -> None:
        meta = self.query_meta(attribute, key)
        if meta is None:
            meta = self.create_element("meta")
            meta.set_attribute(attribute, key)
            self.head.append_child(meta)
        meta.set_attribute("content", content)

    def replace_container(
        self, container_id: str, position: ContainerPosition, html: Optional[str]
    ) -> Optional[Element]:
        """
        Remove the container with ``container_id`` and, when ``html`` is given,
        insert a fresh ``div`` holding it at ``position``.
        """
        existing = self.get_element_by_id(container_id)
        if existing is not None:
            existing.remove()
        if not html:
            return None

        container = self.create_element("div")
        container.set_attribute("id", container_id)
        container.set_inner_html(html)
        if position == "head_end":
            self.head.append_child(container)
        elif position == "body_start":
            self.body.insert_before(container, self.body.first_child)
        else:
            self.body.append_child(container)
        return container

    def set_favicon(self, url: str) -> None:
        for link in self.query_links("icon"):
            link.remove()

        icon = self.create_element("link")
        icon.set_attribute("rel", "icon")
        icon.set_attribute("type", "image/x-icon")
        icon.set_attribute("href", url)
        self.head.append_child(icon)

        apple = self.create_element("link")
        apple.set_attribute("rel", "apple-touch-icon")
        apple.set_attribute("href", url)
        self.head.append_child(apple)


__all__ = [
    "Comment",
    "ContainerPosition",
    "Document",
    "DocumentSink",
    "Element",
    "Node",
    "Text",
    "parse_fragment",
]
