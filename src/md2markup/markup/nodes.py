#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/markup/nodes.py
"""Markup tree node classes.

The EventTreeRenderer produces a fragment: an ordered tuple of markup nodes.
There are three node types:

    - Element: a tag with attributes and child nodes
    - TextNode: plain text, escaped when written out as HTML
    - RawHtml: trusted markup, written out verbatim

All nodes are immutable once built.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

AttributeValue = Union[str, bool]


@dataclass(frozen=True)
class TextNode:
    """Text leaf.

    Parameters
    ----------
    text : str
        Literal text; the serializer escapes it

    """

    text: str


@dataclass(frozen=True)
class RawHtml:
    """Trusted markup leaf injected without escaping.

    Parameters
    ----------
    html : str
        Markup source

    """

    html: str


@dataclass(frozen=True)
class Element:
    """Markup element.

    Parameters
    ----------
    tag : str
        Tag name (e.g. ``"p"``, ``"pre"``)
    attributes : mapping of str to str or bool, default = empty
        Attribute values in insertion order. ``True`` writes a bare boolean
        attribute and ``False`` omits it. The mapping is made read-only.
    children : tuple of Markup, default = ()
        Child nodes in document order

    Examples
    --------
        >>> node = Element("a", {"href": "https://example.com"}, (TextNode("site"),))
        >>> node.get("href")
        'https://example.com'

    """

    tag: str
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)
    children: tuple["Markup", ...] = ()

    def __post_init__(self) -> None:
        """Freeze attributes and children."""
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.tag, tuple(self.attributes.items()), self.children))

    def get(self, name: str, default: Optional[AttributeValue] = None) -> Optional[AttributeValue]:
        """Return an attribute value, or ``default`` when it is not set."""
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Return True when the attribute would appear in serialized output."""
        value = self.attributes.get(name)
        return value is not None and value is not False

    @property
    def classes(self) -> list[str]:
        """Return the individual tokens of the ``class`` attribute."""
        value = self.attributes.get("class")
        return value.split() if isinstance(value, str) else []

    def iter(self) -> Iterator["Markup"]:
        """Iterate over this element and all descendants, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()
            else:
                yield child


Markup = Union[Element, TextNode, RawHtml]
Fragment = tuple[Markup, ...]


def iter_fragment(fragment: Union[Markup, Fragment]) -> Iterator[Markup]:
    """Iterate over every node of a node or fragment, depth first."""
    nodes = fragment if isinstance(fragment, tuple) else (fragment,)
    for node in nodes:
        if isinstance(node, Element):
            yield from node.iter()
        else:
            yield node


def find_all(fragment: Union[Markup, Fragment], tag: str) -> list[Element]:
    """Return every element with the given tag name, in document order."""
    return [node for node in iter_fragment(fragment) if isinstance(node, Element) and node.tag == tag]


def find_first(fragment: Union[Markup, Fragment], tag: str) -> Optional[Element]:
    """Return the first element with the given tag name, or None."""
    for node in iter_fragment(fragment):
        if isinstance(node, Element) and node.tag == tag:
            return node
    return None


def text_content(fragment: Union[Markup, Fragment]) -> str:
    """Concatenate all text and raw markup leaves, in order."""
    parts = []
    for node in iter_fragment(fragment):
        if isinstance(node, TextNode):
            parts.append(node.text)
        elif isinstance(node, RawHtml):
            parts.append(node.html)
    return "".join(parts)
