#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/parsers/markdown.py
"""Markdown to event stream tokenizer.

This module wraps the mistune parser and flattens its nested token tree into
the linear event stream consumed by the EventTreeRenderer: every container
token becomes a ``StartElement`` / ``EndElement`` pair around the events of
its children, and leaf tokens become single events.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from md2markup.constants import (
    DEFINITION_LIST_PLUGINS,
    DEPS_MARKDOWN,
    GFM_PLUGINS,
    MATH_PLUGINS,
    SUPERSCRIPT_SUBSCRIPT_PLUGINS,
    TOML_FRONTMATTER_DELIMITER,
    YAML_FRONTMATTER_DELIMITER,
)
from md2markup.events import (
    BlockQuote,
    CodeBlock,
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
from md2markup.options.markup import RenderOptions
from md2markup.utils.decorators import requires_dependencies
from md2markup.utils.html_utils import unescape_html

logger = logging.getLogger(__name__)

# Inline containers whose children map one-to-one onto a single element kind
_INLINE_CONTAINERS: dict[str, type] = {
    "emphasis": Emphasis,
    "strong": Strong,
    "strikethrough": Strikethrough,
    "superscript": Superscript,
    "subscript": Subscript,
}

# Token types that carry no content of their own
_IGNORED_TOKENS = frozenset({"blank_line"})

# Lines that open a YAML mapping entry, sequence item or comment
_YAML_DATA_LINE = re.compile(r"""^(?:[\w"'.$-][^:]*:(?:\s|$)|-(?:\s|$)|#)""")

# Lines that open a TOML key/value pair, table header or comment
_TOML_DATA_LINE = re.compile(r"""^(?:[\w"'.-][\w"'. -]*=|\[|#)""")

# Footnote labels as written in references and definitions
_FOOTNOTE_LABEL = re.compile(r"\[\^((?:[^\\\[\]\s]|\\.){1,500})\]")


def _looks_like_frontmatter(lines: list[str], style: str) -> bool:
    """Return True when ``lines`` read as YAML or TOML data.

    Blank and indented continuation lines are accepted, but the block must
    open with a data line and every unindented line must be one.
    """
    pattern = _YAML_DATA_LINE if style == "yaml" else _TOML_DATA_LINE
    seen_data = False
    for line in lines:
        if not line.strip():
            continue
        if line[0] in " \t":
            if not seen_data:
                return False
            continue
        if not pattern.match(line):
            return False
        seen_data = True
    return True


def _footnote_key(label: str) -> str:
    # Same normalization mistune applies to footnote keys
    return " ".join(label.split()).strip().lower().upper()


def _footnote_labels(markdown_content: str) -> dict[str, str]:
    """Map each normalized footnote key to the first spelling of its label."""
    labels: dict[str, str] = {}
    for match in _FOOTNOTE_LABEL.finditer(markdown_content):
        labels.setdefault(_footnote_key(match.group(1)), match.group(1))
    return labels


class MarkdownEventParser:
    r"""Tokenize Markdown into a flat event stream.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Only the tokenizer toggles are consulted: ``enable_gfm``,
        ``enable_math``, ``enable_definition_lists``,
        ``enable_superscript_subscript`` and ``enable_metadata_blocks``.

    Examples
    --------
        >>> parser = MarkdownEventParser()
        >>> events = parser.parse("# Hello\\n\\nThis is **bold**.")
        >>> events[0]
        StartElement(kind=Heading(level=<HeadingLevel.H1: 1>))

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the tokenizer with options."""
        self.options: RenderOptions = options or RenderOptions()
        self._footnote_labels: dict[str, str] = {}

    def plugins(self) -> list[str]:
        """Return the mistune plugin names enabled by the options."""
        plugins: list[str] = []
        if self.options.enable_gfm:
            plugins.extend(GFM_PLUGINS)
        if self.options.enable_math:
            plugins.extend(MATH_PLUGINS)
        if self.options.enable_definition_lists:
            plugins.extend(DEFINITION_LIST_PLUGINS)
        if self.options.enable_superscript_subscript:
            plugins.extend(SUPERSCRIPT_SUBSCRIPT_PLUGINS)
        return plugins

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, markdown_content: str) -> list[Event]:
        """Tokenize Markdown text.

        Parameters
        ----------
        markdown_content : str
            Markdown source

        Returns
        -------
        list of Event
            Well-nested event stream

        """
        import mistune

        events: list[Event] = []

        if self.options.enable_metadata_blocks:
            markdown_content = self._extract_frontmatter(markdown_content, events)

        self._footnote_labels = _footnote_labels(markdown_content) if self.options.enable_gfm else {}
        markdown = mistune.create_markdown(renderer=None, plugins=self.plugins())
        tokens, _state = markdown.parse(markdown_content)

        if isinstance(tokens, list):
            self._emit_blocks(tokens, events)

        return events

    def _extract_frontmatter(self, content: str, events: list[Event]) -> str:
        """Emit a metadata block for leading front matter and strip it from the content.

        The block between the delimiters must read as YAML or TOML data, so a
        paragraph sandwiched between thematic breaks stays Markdown.

        Parameters
        ----------
        content : str
            Markdown content
        events : list of Event
            Event list to append the metadata block to

        Returns
        -------
        str
            Content with the front matter removed, or unchanged if none found

        """
        for delimiter, style in ((YAML_FRONTMATTER_DELIMITER, "yaml"), (TOML_FRONTMATTER_DELIMITER, "toml")):
            if not (content.startswith(delimiter + "\n") or content.startswith(delimiter + "\r\n")):
                continue

            lines = content.splitlines(keepends=True)
            for index in range(1, len(lines)):
                if lines[index].strip() == delimiter:
                    if not _looks_like_frontmatter(lines[1:index], style):
                        logger.debug("Leading %s block is not %s data; parsing it as markdown", delimiter, style)
                        return content
                    events.append(StartElement(MetadataBlock(style=style)))
                    raw = "".join(lines[1:index])
                    if raw:
                        events.append(Text(raw))
                    events.append(EndElement())
                    return "".join(lines[index + 1 :])
            return content

        return content

    def _footnote_label(self, key: str) -> str:
        """Return the label as the author wrote it for a normalized mistune key."""
        return self._footnote_labels.get(key, key)

    def _open(self, kind: ElementKind, children: Any, events: list[Event], inline: bool = False) -> None:
        """Emit a container of ``kind`` wrapping the events of ``children``."""
        events.append(StartElement(kind))
        if isinstance(children, list):
            if inline:
                self._emit_inlines(children, events)
            else:
                self._emit_blocks(children, events)
        events.append(EndElement())

    def _emit_blocks(self, tokens: list[dict[str, Any]], events: list[Event]) -> None:
        for token in tokens:
            if isinstance(token, dict):
                self._emit_block(token, events)

    def _emit_block(self, token: dict[str, Any], events: list[Event]) -> None:
        """Emit the events of one block-level token."""
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}
        children = token.get("children", [])

        if token_type == "paragraph":
            self._open(Paragraph(), children, events, inline=True)
        elif token_type == "block_text":
            # Tight list items hold their inline content directly
            self._emit_inlines(children, events)
        elif token_type == "heading":
            level = attrs.get("level", 1)
            if not isinstance(level, int) or not 1 <= level <= 6:
                level = 1
            self._open(Heading(level=level), children, events, inline=True)
        elif token_type == "block_code":
            self._emit_code_block(token, events)
        elif token_type == "block_quote":
            self._open(BlockQuote(), children, events)
        elif token_type == "list":
            start = attrs.get("start", 1) if attrs.get("ordered") else None
            self._open(List(start=start), children, events)
        elif token_type in ("list_item", "task_list_item"):
            events.append(StartElement(ListItem()))
            if token_type == "task_list_item":
                events.append(TaskMarker(checked=bool(attrs.get("checked"))))
            self._emit_blocks(children, events)
            events.append(EndElement())
        elif token_type == "thematic_break":
            events.append(ThematicBreak())
        elif token_type == "block_html":
            events.append(StartElement(HtmlBlock()))
            raw = token.get("raw", "")
            if raw:
                events.append(Text(raw))
            events.append(EndElement())
        elif token_type == "block_math":
            events.append(DisplayMath(token.get("raw", "")))
        elif token_type == "table":
            self._open(Table(), children, events)
        elif token_type == "table_head":
            self._open(TableHead(), children, events)
        elif token_type == "table_body":
            # Body rows sit directly inside the table
            self._emit_blocks(children, events)
        elif token_type == "table_row":
            self._open(TableRow(), children, events)
        elif token_type == "table_cell":
            self._open(TableCell(), children, events, inline=True)
        elif token_type == "footnotes":
            self._emit_blocks(children, events)
        elif token_type == "footnote_item":
            label = self._footnote_label(attrs.get("key") or attrs.get("label") or "")
            self._open(FootnoteDefinition(label=label), children, events)
        elif token_type == "def_list":
            self._open(DefinitionList(), children, events)
        elif token_type == "def_list_head":
            self._open(DefinitionTerm(), children, events, inline=True)
        elif token_type in ("def_list_item", "def_list_content"):
            self._open(DefinitionDescription(), children, events)
        elif token_type in _IGNORED_TOKENS:
            return
        elif token_type in _INLINE_CONTAINERS or token_type in ("text", "codespan", "link", "image"):
            self._emit_inline(token, events)
        else:
            logger.debug("Skipping unsupported markdown token: %s", token_type)

    def _emit_code_block(self, token: dict[str, Any], events: list[Event]) -> None:
        """Emit a code block; the language is the first word of the info string."""
        attrs = token.get("attrs") or {}
        info: Optional[str] = attrs.get("info")

        if token.get("style") == "indent":
            kind = CodeBlock(kind=Indented())
        else:
            parts = info.strip().split(maxsplit=1) if info else []
            kind = CodeBlock(kind=Fenced(language=parts[0] if parts else ""))

        events.append(StartElement(kind))
        code = token.get("raw", "")
        if code:
            events.append(Text(code))
        events.append(EndElement())

    def _emit_inlines(self, tokens: Any, events: list[Event]) -> None:
        if not isinstance(tokens, list):
            return
        for token in tokens:
            if isinstance(token, dict):
                self._emit_inline(token, events)

    def _emit_inline(self, token: dict[str, Any], events: list[Event]) -> None:
        """Emit the events of one inline token."""
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}
        children = token.get("children", [])

        if token_type == "text":
            events.append(Text(unescape_html(token.get("raw", ""))))
        elif token_type in _INLINE_CONTAINERS:
            self._open(_INLINE_CONTAINERS[token_type](), children, events, inline=True)
        elif token_type == "codespan":
            events.append(InlineCode(token.get("raw", "")))
        elif token_type == "link":
            kind = Link(url=attrs.get("url", ""), title=unescape_html(attrs.get("title") or ""))
            self._open(kind, children, events, inline=True)
        elif token_type == "image":
            kind = Image(url=attrs.get("url", ""), title=unescape_html(attrs.get("title") or ""))
            self._open(kind, children, events, inline=True)
        elif token_type == "softbreak":
            events.append(SoftBreak())
        elif token_type == "linebreak":
            events.append(SoftBreak() if attrs.get("soft") else HardBreak())
        elif token_type == "inline_html":
            events.append(RawInlineHtml(token.get("raw", "")))
        elif token_type == "inline_math":
            events.append(InlineMath(token.get("raw", "")))
        elif token_type == "block_math":
            # $$...$$ inside a paragraph
            events.append(DisplayMath(token.get("raw", "")))
        elif token_type == "footnote_ref":
            events.append(FootnoteReference(label=self._footnote_label(token.get("raw", ""))))
        else:
            logger.debug("Skipping unsupported inline markdown token: %s", token_type)


def markdown_to_events(markdown_content: str, options: RenderOptions | None = None) -> list[Event]:
    r"""Tokenize a Markdown string into a flat event stream.

    Parameters
    ----------
    markdown_content : str
        Markdown text to tokenize
    options : RenderOptions or None, default = None
        Tokenizer toggles

    Returns
    -------
    list of Event
        Event stream

    Examples
    --------
    >>> from md2markup.parsers.markdown import markdown_to_events
    >>> len(markdown_to_events("Hello"))
    3

    """
    return MarkdownEventParser(options).parse(markdown_content)
