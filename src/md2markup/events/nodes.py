#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/events/nodes.py
"""Parse event and element kind types.

This module defines the closed set of values that make up a flat Markdown
event stream. A tokenizer describes a document as a linear sequence of
events: a ``StartElement`` opens a container, the events that follow are its
children, and a matching ``EndElement`` closes it. Leaf events (text, code
spans, breaks, ...) stand on their own.

Both families are closed unions of frozen dataclasses:

Element kinds (carried by ``StartElement``):
    - Paragraph, Heading, BlockQuote, CodeBlock, List, ListItem
    - Emphasis, Strong, Strikethrough, Superscript, Subscript
    - Link, Image
    - Table, TableHead, TableRow, TableCell
    - FootnoteDefinition, HtmlBlock, MetadataBlock
    - DefinitionList, DefinitionTerm, DefinitionDescription

Events:
    - StartElement, EndElement
    - Text, InlineCode, RawInlineHtml, InlineMath, DisplayMath
    - SoftBreak, HardBreak, ThematicBreak
    - FootnoteReference, TaskMarker

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union, get_args

from md2markup.constants import MetadataStyle


class HeadingLevel(IntEnum):
    """Heading level, restricted to the six levels HTML supports."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6

    @property
    def tag(self) -> str:
        """Return the HTML tag name for this level (``h1`` .. ``h6``)."""
        return f"h{self.value}"


# =============================================================================
# Code block kinds
# =============================================================================


@dataclass(frozen=True)
class Indented:
    """Code block introduced by indentation; it has no language."""


@dataclass(frozen=True)
class Fenced:
    """Code block delimited by a fence.

    Parameters
    ----------
    language : str, default = ""
        Language named after the opening fence, empty when none was given

    """

    language: str = ""


CodeBlockKind = Union[Indented, Fenced]


# =============================================================================
# Element kinds
# =============================================================================


@dataclass(frozen=True)
class Paragraph:
    """Paragraph of inline content."""


@dataclass(frozen=True)
class Heading:
    """Heading container.

    Parameters
    ----------
    level : HeadingLevel or int
        Heading level from 1 to 6. Plain integers are converted; anything
        outside 1-6 raises ``ValueError``.

    """

    level: HeadingLevel

    def __post_init__(self) -> None:
        """Normalize the level to a ``HeadingLevel`` member."""
        if not isinstance(self.level, HeadingLevel):
            try:
                level = HeadingLevel(self.level)
            except ValueError:
                raise ValueError(f"Heading level must be 1-6, got {self.level!r}") from None
            object.__setattr__(self, "level", level)


@dataclass(frozen=True)
class BlockQuote:
    """Block quote containing other blocks."""


@dataclass(frozen=True)
class CodeBlock:
    """Code block; its children are the text leaves of the code.

    Parameters
    ----------
    kind : Indented or Fenced
        How the block was written in the source

    """

    kind: CodeBlockKind


@dataclass(frozen=True)
class List:
    """Ordered or unordered list.

    Parameters
    ----------
    start : int or None, default = None
        First item number for ordered lists, None for unordered lists

    """

    start: Optional[int] = None

    @property
    def ordered(self) -> bool:
        """Return True when this is an ordered (numbered) list."""
        return self.start is not None


@dataclass(frozen=True)
class ListItem:
    """Item of a list."""


@dataclass(frozen=True)
class Emphasis:
    """Emphasized inline content."""


@dataclass(frozen=True)
class Strong:
    """Strongly emphasized inline content."""


@dataclass(frozen=True)
class Strikethrough:
    """Struck-through inline content."""


@dataclass(frozen=True)
class Link:
    """Hyperlink; its children are the link text.

    Parameters
    ----------
    url : str
        Link destination
    title : str, default = ""
        Link title, empty when none was given

    """

    url: str
    title: str = ""


@dataclass(frozen=True)
class Image:
    """Image; its children are the alternative text.

    Parameters
    ----------
    url : str
        Image source
    title : str, default = ""
        Image title, empty when none was given

    """

    url: str
    title: str = ""


@dataclass(frozen=True)
class Table:
    """Table; children are a TableHead followed by TableRows."""


@dataclass(frozen=True)
class TableHead:
    """Header section of a table; children are TableCells."""


@dataclass(frozen=True)
class TableRow:
    """Body row of a table; children are TableCells."""


@dataclass(frozen=True)
class TableCell:
    """Table cell of inline content."""


@dataclass(frozen=True)
class FootnoteDefinition:
    """Footnote body.

    Parameters
    ----------
    label : str
        Footnote label, as used by FootnoteReference events

    """

    label: str


@dataclass(frozen=True)
class HtmlBlock:
    """Raw HTML block; its children are Text events with the HTML source."""


@dataclass(frozen=True)
class DefinitionList:
    """Definition list of terms and descriptions."""


@dataclass(frozen=True)
class DefinitionTerm:
    """Term of a definition list."""


@dataclass(frozen=True)
class DefinitionDescription:
    """Description of a definition list term."""


@dataclass(frozen=True)
class Superscript:
    """Superscript inline content."""


@dataclass(frozen=True)
class Subscript:
    """Subscript inline content."""


@dataclass(frozen=True)
class MetadataBlock:
    """Front matter block; its children are Text events with the raw metadata.

    Parameters
    ----------
    style : {"yaml", "toml"}, default = "yaml"
        Front matter syntax (``---`` delimited YAML or ``+++`` delimited TOML)

    """

    style: MetadataStyle = "yaml"


ElementKind = Union[
    Paragraph,
    Heading,
    BlockQuote,
    CodeBlock,
    List,
    ListItem,
    Emphasis,
    Strong,
    Strikethrough,
    Link,
    Image,
    Table,
    TableHead,
    TableRow,
    TableCell,
    FootnoteDefinition,
    HtmlBlock,
    DefinitionList,
    DefinitionTerm,
    DefinitionDescription,
    Superscript,
    Subscript,
    MetadataBlock,
]

ELEMENT_KINDS: tuple[type, ...] = get_args(ElementKind)


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class StartElement:
    """Opens a container of the given kind.

    Parameters
    ----------
    kind : ElementKind
        The container being opened

    """

    kind: ElementKind


@dataclass(frozen=True)
class EndElement:
    """Closes the most recently opened container."""


@dataclass(frozen=True)
class Text:
    """Plain text leaf."""

    text: str


@dataclass(frozen=True)
class InlineCode:
    """Inline code span."""

    code: str


@dataclass(frozen=True)
class RawInlineHtml:
    """Raw HTML found inline in a paragraph."""

    html: str


@dataclass(frozen=True)
class SoftBreak:
    """Line ending inside a paragraph that does not force a break."""


@dataclass(frozen=True)
class HardBreak:
    """Forced line break."""


@dataclass(frozen=True)
class ThematicBreak:
    """Horizontal rule between blocks."""


@dataclass(frozen=True)
class FootnoteReference:
    """Reference to a footnote definition."""

    label: str


@dataclass(frozen=True)
class TaskMarker:
    """Task list checkbox at the start of a list item."""

    checked: bool


@dataclass(frozen=True)
class InlineMath:
    """Math expression inside a line of text."""

    expression: str


@dataclass(frozen=True)
class DisplayMath:
    """Math expression displayed on its own."""

    expression: str


Event = Union[
    StartElement,
    EndElement,
    Text,
    InlineCode,
    RawInlineHtml,
    SoftBreak,
    HardBreak,
    ThematicBreak,
    FootnoteReference,
    TaskMarker,
    InlineMath,
    DisplayMath,
]

LEAF_EVENTS: tuple[type, ...] = (
    Text,
    InlineCode,
    RawInlineHtml,
    SoftBreak,
    HardBreak,
    ThematicBreak,
    FootnoteReference,
    TaskMarker,
    InlineMath,
    DisplayMath,
)
