"""In-memory rendering surface — facade over xml.etree.ElementTree.

Stands in for the hosting document: creates elements, resolves selectors,
attaches and detaches nodes, and manages text content and inline style.
Shapes receive a Document explicitly and never reach for a global one.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# tag, tag#id, tag.class, #id, .class
_SELECTOR_RE = re.compile(
    r"^(?P<tag>[A-Za-z][\w-]*)?(?:#(?P<id>[\w-]+)|\.(?P<cls>[\w-]+))?$"
)

_VENDOR_PREFIXES = ("-webkit-", "-moz-", "-ms-", "-o-")


class Document:
    """A mutable element tree acting as the host surface."""

    def __init__(self, root: ET.Element | None = None) -> None:
        self.root = root if root is not None else ET.Element("html")

    @classmethod
    def from_string(cls, markup: str) -> Document:
        return cls(ET.fromstring(markup))

    # ── Element creation ──

    def create_element(self, tag: str, attrib: dict[str, str] | None = None) -> ET.Element:
        return ET.Element(tag, dict(attrib or {}))

    def create_svg_element(self, tag: str) -> ET.Element:
        """Create an element in the SVG namespace. Only the root carries xmlns."""
        element = ET.Element(tag)
        if tag == "svg":
            element.set("xmlns", SVG_NS)
        return element

    # ── Lookup ──

    def query_selector(self, selector: str) -> ET.Element | None:
        """Return the first element matching a simple selector, in document order."""
        match = _SELECTOR_RE.match(selector.strip())
        if match is None or not any(match.groupdict().values()):
            logger.debug("Unsupported selector %r", selector)
            return None

        tag, elem_id, cls = match.group("tag"), match.group("id"), match.group("cls")
        for element in self.root.iter():
            if tag and element.tag != tag:
                continue
            if elem_id and element.get("id") != elem_id:
                continue
            if cls and cls not in element.get("class", "").split():
                continue
            return element
        return None

    def contains(self, node: ET.Element) -> bool:
        return any(element is node for element in self.root.iter())

    def parent_of(self, node: ET.Element) -> ET.Element | None:
        for element in self.root.iter():
            for child in element:
                if child is node:
                    return element
        return None

    # ── Tree mutation ──

    def append_child(self, parent: ET.Element, child: ET.Element) -> None:
        parent.append(child)

    def detach(self, node: ET.Element, parent: ET.Element | None = None) -> bool:
        """Detach node from its parent. Returns False if it was not attached.

        ``parent`` is checked first, so a node can be detached from a subtree
        the host has already removed from this document.
        """
        if parent is None or not any(child is node for child in parent):
            parent = self.parent_of(node)
        if parent is None:
            return False
        parent.remove(node)
        return True

    # ── Text content ──

    def text_content_children(self, node: ET.Element) -> list[str]:
        """Text-content children of node. ElementTree keeps at most one."""
        return [] if node.text is None else [node.text]

    def remove_text_content(self, node: ET.Element) -> None:
        node.text = None

    def append_text_content(self, node: ET.Element, text: str) -> None:
        if node.text is not None:
            raise ValueError(f"<{node.tag}> already holds a text-content child")
        node.text = text

    # ── Inline style ──

    def get_style(self, node: ET.Element) -> dict[str, str]:
        style: dict[str, str] = {}
        for declaration in node.get("style", "").split(";"):
            name, sep, value = declaration.partition(":")
            if sep and name.strip():
                style[name.strip()] = value.strip()
        return style

    def set_style(self, node: ET.Element, name: str, value: str | float, *, prefixed: bool = False) -> None:
        """Set one inline style property. ``prefixed`` also writes vendor-prefixed copies."""
        style = self.get_style(node)
        if prefixed:
            for prefix in _VENDOR_PREFIXES:
                style[prefix + name] = str(value)
        style[name] = str(value)
        node.set("style", "; ".join(f"{k}: {v}" for k, v in style.items()))

    def to_string(self) -> str:
        return ET.tostring(self.root, encoding="unicode")
