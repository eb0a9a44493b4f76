#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/markup/serialization.py
"""HTML and JSON serialization for markup trees.

Examples
--------
Serialize a fragment to HTML:

    >>> from md2markup.markup import Element, TextNode, to_html
    >>> to_html(Element("p", {}, (TextNode("a < b"),)))
    '<p>a &lt; b</p>'

Serialize to JSON:

    >>> from md2markup.markup import markup_to_json
    >>> print(markup_to_json((Element("hr"),)))
    [{"node_type": "Element", "tag": "hr"}]

"""

from __future__ import annotations

import json
from typing import Any, Union

from md2markup.constants import VOID_ELEMENTS
from md2markup.markup.nodes import Element, Fragment, Markup, RawHtml, TextNode
from md2markup.utils.html_utils import escape_attribute, escape_html


def _serialize_attributes(node: Element) -> str:
    """Build the attribute string for an opening tag (leading space included)."""
    parts = []
    for name, value in node.attributes.items():
        if value is True:
            parts.append(f" {name}")
        elif value is False or value is None:
            continue
        else:
            parts.append(f' {name}="{escape_attribute(str(value))}"')
    return "".join(parts)


def _write_node(node: Markup, output: list[str]) -> None:
    if isinstance(node, TextNode):
        output.append(escape_html(node.text))
    elif isinstance(node, RawHtml):
        output.append(node.html)
    else:
        output.append(f"<{node.tag}{_serialize_attributes(node)}>")
        if node.tag in VOID_ELEMENTS:
            return
        for child in node.children:
            _write_node(child, output)
        output.append(f"</{node.tag}>")


def to_html(markup: Union[Markup, Fragment]) -> str:
    """Serialize a node or fragment to an HTML string.

    Text leaves are escaped, raw markup leaves are written verbatim and void
    elements (``img``, ``br``, ``hr``, ``input``, ...) get no closing tag.

    Parameters
    ----------
    markup : Markup or tuple of Markup
        Node or fragment to serialize

    Returns
    -------
    str
        HTML text

    """
    output: list[str] = []
    nodes = markup if isinstance(markup, tuple) else (markup,)
    for node in nodes:
        _write_node(node, output)
    return "".join(output)


def markup_to_dict(node: Markup) -> dict[str, Any]:
    """Convert a markup node to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Markup
        Node to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` discriminator

    """
    if isinstance(node, TextNode):
        return {"node_type": "TextNode", "text": node.text}
    if isinstance(node, RawHtml):
        return {"node_type": "RawHtml", "html": node.html}

    result: dict[str, Any] = {"node_type": "Element", "tag": node.tag}
    if node.attributes:
        result["attributes"] = dict(node.attributes)
    if node.children:
        result["children"] = [markup_to_dict(child) for child in node.children]
    return result


def dict_to_markup(data: dict[str, Any]) -> Markup:
    """Rebuild a markup node from a dictionary made by ``markup_to_dict``.

    Raises
    ------
    ValueError
        If the dictionary has an unknown or missing ``node_type``

    """
    node_type = data.get("node_type")
    if node_type == "TextNode":
        return TextNode(data["text"])
    if node_type == "RawHtml":
        return RawHtml(data["html"])
    if node_type == "Element":
        children = tuple(dict_to_markup(child) for child in data.get("children", []))
        return Element(data["tag"], data.get("attributes", {}), children)
    raise ValueError(f"Unknown markup node type: {node_type!r}")


def markup_to_json(fragment: Union[Markup, Fragment], indent: int | None = None) -> str:
    """Serialize a node or fragment to a JSON string (always a JSON list)."""
    nodes = fragment if isinstance(fragment, tuple) else (fragment,)
    return json.dumps([markup_to_dict(node) for node in nodes], indent=indent, ensure_ascii=False)


def json_to_markup(json_str: str) -> Fragment:
    """Parse a JSON string made by ``markup_to_json`` back into a fragment."""
    data = json.loads(json_str)
    if not isinstance(data, list):
        raise ValueError("Markup JSON must be a list of nodes")
    return tuple(dict_to_markup(item) for item in data)
