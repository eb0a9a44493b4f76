#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/events/__init__.py
"""Flat Markdown event stream types.

A tokenizer turns Markdown text into a list of these events, which the
EventTreeRenderer then folds back into a nested markup tree.

Examples
--------
    >>> from md2markup.events import EndElement, Heading, StartElement, Text
    >>> events = [StartElement(Heading(level=1)), Text("Title"), EndElement()]

"""

from md2markup.events.nodes import (
    ELEMENT_KINDS,
    LEAF_EVENTS,
    BlockQuote,
    CodeBlock,
    CodeBlockKind,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    DisplayMath,
    ElementKind,
    Emphasis,
    EndElement,
    Event,
    Fenced,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Heading,
    HeadingLevel,
    HtmlBlock,
    Image,
    Indented,
    InlineCode,
    InlineMath,
    Link,
    List,
    ListItem,
    MetadataBlock,
    Paragraph,
    RawInlineHtml,
    SoftBreak,
    StartElement,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableHead,
    TableRow,
    TaskMarker,
    Text,
    ThematicBreak,
)
from md2markup.events.utils import extract_text, is_well_nested, nesting_depths

__all__ = [
    "ELEMENT_KINDS",
    "LEAF_EVENTS",
    "BlockQuote",
    "CodeBlock",
    "CodeBlockKind",
    "DefinitionDescription",
    "DefinitionList",
    "DefinitionTerm",
    "DisplayMath",
    "ElementKind",
    "Emphasis",
    "EndElement",
    "Event",
    "Fenced",
    "FootnoteDefinition",
    "FootnoteReference",
    "HardBreak",
    "Heading",
    "HeadingLevel",
    "HtmlBlock",
    "Image",
    "Indented",
    "InlineCode",
    "InlineMath",
    "Link",
    "List",
    "ListItem",
    "MetadataBlock",
    "Paragraph",
    "RawInlineHtml",
    "SoftBreak",
    "StartElement",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableHead",
    "TableRow",
    "TaskMarker",
    "Text",
    "ThematicBreak",
    "extract_text",
    "is_well_nested",
    "nesting_depths",
]
