"""Queryable view of a parsed NML document.

The decoder only needs two capabilities: find descendant nodes by a
whitespace-separated tag path, and read attributes as strings. Both are
expressed as protocols so any XML backend can be plugged in;
``ElementTreeDocument`` is the stock implementation.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class NMLParseError(Exception):
    """Raised when an NML file cannot be read as XML."""


class Node(Protocol):
    def attribute(self, name: str) -> str:
        """Return the attribute value, or "" when it is absent."""
        ...


class Document(Protocol):
    def find_all(self, tag: str, scope: Node | None = None) -> list[Node]:
        """All descendants matching ``tag``, in document order."""
        ...

    def find_first(self, tag: str, scope: Node | None = None) -> Node | None:
        """First descendant matching ``tag``, or None."""
        ...


# ---------------------------------------------------------------------------
# ElementTree backend
# ---------------------------------------------------------------------------

def _descendant_path(tag: str) -> str:
    """Turn 'PLAYLIST ENTRY' into the ElementTree path './/PLAYLIST//ENTRY'."""
    parts = tag.split()
    if not parts:
        raise ValueError("Empty tag path")
    return ".//" + "//".join(parts)


class ElementNode:
    """Node backed by an ElementTree element."""

    __slots__ = ("element",)

    def __init__(self, element: ET.Element) -> None:
        self.element = element

    def attribute(self, name: str) -> str:
        return self.element.get(name, "")

    def __repr__(self) -> str:
        return f"ElementNode(<{self.element.tag}>)"


class ElementTreeDocument:
    """Document backed by an ElementTree root element."""

    def __init__(self, root: ET.Element) -> None:
        self.root = root

    @classmethod
    def from_string(cls, text: str | bytes) -> ElementTreeDocument:
        try:
            return cls(ET.fromstring(text))
        except ET.ParseError as exc:
            raise NMLParseError(f"Malformed NML: {exc}") from exc

    def _scope_element(self, scope: Node | None) -> ET.Element:
        if scope is None:
            return self.root
        if not isinstance(scope, ElementNode):
            raise TypeError(f"Scope must be an ElementNode, got {type(scope).__name__}")
        return scope.element

    def find_all(self, tag: str, scope: Node | None = None) -> list[Node]:
        element = self._scope_element(scope)
        return [ElementNode(e) for e in element.iterfind(_descendant_path(tag))]

    def find_first(self, tag: str, scope: Node | None = None) -> Node | None:
        found = self._scope_element(scope).find(_descendant_path(tag))
        if found is None:
            return None
        return ElementNode(found)


def load_document(path: Path | str) -> ElementTreeDocument:
    """Read and parse an NML file from disk.

    Raises FileNotFoundError if the file doesn't exist.
    Raises NMLParseError if the file is not well-formed XML.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"NML file not found: {path}")

    try:
        tree = ET.parse(path)
    except ET.ParseError as exc:
        raise NMLParseError(f"Malformed NML in {path}: {exc}") from exc

    logger.debug("Loaded NML document %s (root <%s>)", path, tree.getroot().tag)
    return ElementTreeDocument(tree.getroot())
