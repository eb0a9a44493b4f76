#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/markup/__init__.py
"""Markup tree produced by rendering, with HTML and JSON serialization."""

from md2markup.markup.nodes import (
    AttributeValue,
    Element,
    Fragment,
    Markup,
    RawHtml,
    TextNode,
    find_all,
    find_first,
    iter_fragment,
    text_content,
)
from md2markup.markup.serialization import (
    dict_to_markup,
    json_to_markup,
    markup_to_dict,
    markup_to_json,
    to_html,
)

__all__ = [
    "AttributeValue",
    "Element",
    "Fragment",
    "Markup",
    "RawHtml",
    "TextNode",
    "dict_to_markup",
    "find_all",
    "find_first",
    "iter_fragment",
    "json_to_markup",
    "markup_to_dict",
    "markup_to_json",
    "text_content",
    "to_html",
]
