#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/renderers/markup.py
"""Event stream to markup tree rendering.

This module reconstructs a nested markup tree from the flat event stream
produced by the tokenizer. Containers are matched by scanning forward with a
depth counter and rendered by recursive descent over the events strictly
between a ``StartElement`` and its matching ``EndElement``.

A container whose ``EndElement`` never arrives owns every remaining event,
so rendering is total over any event sequence: it never indexes past the
end of the stream and always terminates.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from md2markup.constants import GENERIC_CODE_LANGUAGE, LANGUAGE_CLASS_PREFIX, NEW_TAB_REL, NEW_TAB_TARGET
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
    extract_text,
)
from md2markup.exceptions import Md2MarkupError, RenderError
from md2markup.markup import AttributeValue, Element, Fragment, Markup, RawHtml, TextNode, to_html
from md2markup.options.markup import RenderOptions
from md2markup.renderers.base import BaseRenderer
from md2markup.styles import StyleTarget, join_classes, style_for, style_for_kind, theme_style
from md2markup.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

# Container kinds that map onto a single tag with only a style token
_SIMPLE_TAGS: dict[type, str] = {
    Paragraph: "p",
    BlockQuote: "blockquote",
    ListItem: "li",
    Emphasis: "em",
    Strong: "strong",
    Strikethrough: "del",
    Table: "table",
    TableHead: "thead",
    TableRow: "tr",
    TableCell: "td",
    DefinitionList: "dl",
    DefinitionTerm: "dt",
    DefinitionDescription: "dd",
    Superscript: "sup",
    Subscript: "sub",
}


def find_matching_end(events: Sequence[Event], start: int, stop: Optional[int] = None) -> int:
    """Find the ``EndElement`` matching the ``StartElement`` at ``start``.

    Parameters
    ----------
    events : sequence of Event
        Event stream
    start : int
        Index of a ``StartElement``
    stop : int or None, default = None
        Exclusive upper bound of the scan; defaults to ``len(events)``

    Returns
    -------
    int
        Index of the matching ``EndElement``, or ``stop`` if the container is
        never closed before the bound

    Examples
    --------
        >>> from md2markup.events import EndElement, Paragraph, StartElement, Text
        >>> find_matching_end([StartElement(Paragraph()), Text("a"), EndElement()], 0)
        2
        >>> find_matching_end([StartElement(Paragraph()), Text("a")], 0)
        2

    """
    if stop is None:
        stop = len(events)

    depth = 0
    for index in range(start, stop):
        event = events[index]
        if isinstance(event, StartElement):
            depth += 1
        elif isinstance(event, EndElement):
            depth -= 1
            if depth == 0:
                return index
    return stop


class EventTreeRenderer(BaseRenderer):
    """Fold a flat event stream into a markup tree.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from md2markup.events import EndElement, Heading, StartElement, Text
        >>> renderer = EventTreeRenderer()
        >>> renderer.render_to_string([StartElement(Heading(level=2)), Text("Hi"), EndElement()])
        '<h2>Hi</h2>'

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with options."""
        BaseRenderer._validate_options_type(options, RenderOptions, "markup")
        super().__init__(options)

        self._leaf_handlers: dict[type, Callable[[Event], list[Markup]]] = {
            Text: self._render_text,
            InlineCode: self._render_inline_code,
            RawInlineHtml: self._render_inline_html,
            SoftBreak: self._render_soft_break,
            HardBreak: self._render_hard_break,
            ThematicBreak: self._render_thematic_break,
            FootnoteReference: self._render_footnote_reference,
            TaskMarker: self._render_task_marker,
            InlineMath: self._render_inline_math,
            DisplayMath: self._render_display_math,
        }
        self._container_handlers: dict[type, Callable[[ElementKind, Sequence[Event], int, int], list[Markup]]] = {
            Heading: self._render_heading,
            CodeBlock: self._render_code_block,
            List: self._render_list,
            Link: self._render_link,
            Image: self._render_image,
            FootnoteDefinition: self._render_footnote_definition,
            HtmlBlock: self._render_html_block,
            MetadataBlock: self._render_metadata_block,
        }
        for kind_type in _SIMPLE_TAGS:
            self._container_handlers[kind_type] = self._render_simple

    def render(self, events: Sequence[Event]) -> Fragment:
        """Render an event stream to a markup fragment.

        Parameters
        ----------
        events : sequence of Event
            Flat event stream, possibly malformed

        Returns
        -------
        Fragment
            Top-level markup nodes in document order

        """
        events = list(events)
        with debug_timer(logger, f"Rendering {len(events)} events"):
            return tuple(self._render_range(events, 0, len(events)))

    def render_to_string(self, events: Sequence[Event]) -> str:
        """Render an event stream to an HTML string."""
        return to_html(self.render(events))

    def _render_range(self, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        """Render the sibling events in ``events[start:stop]``."""
        nodes: list[Markup] = []
        position = start
        while position < stop:
            event = events[position]
            if isinstance(event, StartElement):
                end = find_matching_end(events, position, stop)
                if end >= stop:
                    logger.debug("Unterminated %s at event %d; consuming to end", type(event.kind).__name__, position)
                nodes.extend(self._render_container(event.kind, events, position + 1, end))
                position = end + 1
            elif isinstance(event, EndElement):
                logger.debug("Skipping unmatched EndElement at event %d", position)
                position += 1
            else:
                handler = self._leaf_handlers.get(type(event))
                if handler is None:
                    logger.debug("Skipping unsupported event: %s", type(event).__name__)
                else:
                    nodes.extend(handler(event))
                position += 1
        return nodes

    def _render_container(self, kind: ElementKind, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        handler = self._container_handlers.get(type(kind))
        if handler is None:
            logger.debug("Rendering children of unsupported element kind: %s", type(kind).__name__)
            return self._render_range(events, start, stop)
        return handler(kind, events, start, stop)

    def _class_attributes(self, classes: str) -> dict[str, str]:
        return {"class": classes} if classes else {}

    # Containers

    def _render_simple(self, kind: ElementKind, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        return [
            Element(
                _SIMPLE_TAGS[type(kind)],
                self._class_attributes(style_for_kind(kind, self.options)),
                tuple(self._render_range(events, start, stop)),
            )
        ]

    def _render_heading(self, kind: Heading, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        return [
            Element(
                kind.level.tag,
                self._class_attributes(style_for_kind(kind, self.options)),
                tuple(self._render_range(events, start, stop)),
            )
        ]

    def _render_list(self, kind: List, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        attributes = self._class_attributes(style_for_kind(kind, self.options))
        if kind.ordered:
            attributes["start"] = str(kind.start)
        return [Element("ol" if kind.ordered else "ul", attributes, tuple(self._render_range(events, start, stop)))]

    def _render_code_block(self, kind: CodeBlock, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        """Render a code block as ``pre > code``.

        The code text is the concatenation of the text leaves inside the block.
        Language tokens go on both elements; the theme token only on ``pre``.
        """
        code_text = extract_text(events[start:stop])

        language_class = ""
        if self.options.emit_language_classes:
            language = kind.kind.language if isinstance(kind.kind, Fenced) else ""
            language_class = LANGUAGE_CLASS_PREFIX + (language or GENERIC_CODE_LANGUAGE)

        theme_class = theme_style(self.options.code_theme) if self.options.code_theme is not None else ""

        pre_classes = join_classes(style_for_kind(kind, self.options), language_class, theme_class)
        code_classes = join_classes(style_for(StyleTarget.CODE_BLOCK_CODE, self.options), language_class)

        code = Element("code", self._class_attributes(code_classes), (TextNode(code_text),))
        return [Element("pre", self._class_attributes(pre_classes), (code,))]

    def _render_link(self, kind: Link, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        attributes = self._class_attributes(style_for_kind(kind, self.options))
        attributes["href"] = kind.url
        if kind.title:
            attributes["title"] = kind.title
        if self.options.open_links_new_tab:
            attributes["target"] = NEW_TAB_TARGET
            attributes["rel"] = NEW_TAB_REL
        return [Element("a", attributes, tuple(self._render_range(events, start, stop)))]

    def _render_image(self, kind: Image, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        attributes = self._class_attributes(style_for_kind(kind, self.options))
        attributes["src"] = kind.url
        attributes["alt"] = extract_text(events[start:stop])
        if kind.title:
            attributes["title"] = kind.title
        return [Element("img", attributes)]

    def _render_footnote_definition(
        self, kind: FootnoteDefinition, events: Sequence[Event], start: int, stop: int
    ) -> list[Markup]:
        attributes = self._class_attributes(style_for_kind(kind, self.options))
        attributes["id"] = kind.label
        return [Element("div", attributes, tuple(self._render_range(events, start, stop)))]

    def _render_html_block(self, kind: HtmlBlock, events: Sequence[Event], start: int, stop: int) -> list[Markup]:
        raw = extract_text(events[start:stop])
        if self.options.allow_raw_html:
            return [Element("div", {}, (RawHtml(raw),))]
        return [Element("pre", self._class_attributes(style_for_kind(kind, self.options)), (TextNode(raw),))]

    def _render_metadata_block(
        self, kind: MetadataBlock, events: Sequence[Event], start: int, stop: int
    ) -> list[Markup]:
        return []

    # Leaves

    def _render_text(self, event: Text) -> list[Markup]:
        return [TextNode(event.text)]

    def _render_inline_code(self, event: InlineCode) -> list[Markup]:
        classes = style_for(StyleTarget.INLINE_CODE, self.options)
        return [Element("code", self._class_attributes(classes), (TextNode(event.code),))]

    def _render_inline_html(self, event: RawInlineHtml) -> list[Markup]:
        if not self.options.allow_raw_html:
            return [TextNode(event.html)]
        classes = style_for(StyleTarget.INLINE_HTML, self.options)
        return [Element("span", self._class_attributes(classes), (RawHtml(event.html),))]

    def _render_soft_break(self, event: SoftBreak) -> list[Markup]:
        return [Element("span", {}, (TextNode(" "),))]

    def _render_hard_break(self, event: HardBreak) -> list[Markup]:
        return [Element("br")]

    def _render_thematic_break(self, event: ThematicBreak) -> list[Markup]:
        return [Element("hr", self._class_attributes(style_for(StyleTarget.THEMATIC_BREAK, self.options)))]

    def _render_footnote_reference(self, event: FootnoteReference) -> list[Markup]:
        link = Element("a", {"href": f"#{event.label}"}, (TextNode(event.label),))
        classes = style_for(StyleTarget.FOOTNOTE_REFERENCE, self.options)
        return [Element("sup", self._class_attributes(classes), (link,))]

    def _render_task_marker(self, event: TaskMarker) -> list[Markup]:
        classes = style_for(StyleTarget.CHECKBOX, self.options)
        attributes: dict[str, AttributeValue] = dict(self._class_attributes(classes))
        attributes["type"] = "checkbox"
        attributes["disabled"] = True
        attributes["checked"] = event.checked
        return [Element("input", attributes)]

    def _render_inline_math(self, event: InlineMath) -> list[Markup]:
        classes = style_for(StyleTarget.MATH_INLINE, self.options)
        return [Element("span", self._class_attributes(classes), (TextNode(event.expression),))]

    def _render_display_math(self, event: DisplayMath) -> list[Markup]:
        classes = style_for(StyleTarget.MATH_DISPLAY, self.options)
        return [Element("div", self._class_attributes(classes), (TextNode(event.expression),))]


class MarkdownRenderer:
    """Render Markdown text to a markup tree.

    Tokenizes with :class:`~md2markup.parsers.markdown.MarkdownEventParser`
    and folds the events with :class:`EventTreeRenderer`. Failures of the
    tokenizer surface as :class:`~md2markup.exceptions.RenderError`; no
    partial tree is returned.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Rendering options shared by the tokenizer and the tree renderer

    """

    def __init__(self, options: RenderOptions | None = None):
        BaseRenderer._validate_options_type(options, RenderOptions, "markup")
        self.options: RenderOptions = options or RenderOptions()
        self.tree_renderer = EventTreeRenderer(self.options)

    def tokenize(self, content: str) -> list[Event]:
        """Tokenize Markdown text into events.

        Raises
        ------
        RenderError
            If the content is not a string or the tokenizer fails
        DependencyError
            If the tokenizer library is not installed

        """
        from md2markup.parsers.markdown import MarkdownEventParser

        if not isinstance(content, str):
            raise RenderError(
                f"Markdown content must be a string, got {type(content).__name__}",
                rendering_stage="input",
            )

        try:
            with debug_timer(logger, "Tokenizing markdown"):
                return MarkdownEventParser(self.options).parse(content)
        except Md2MarkupError:
            raise
        except Exception as e:
            raise RenderError(
                f"Failed to tokenize markdown: {e!r}",
                rendering_stage="tokenize",
                original_error=e,
            ) from e

    def render(self, content: str) -> Fragment:
        """Render Markdown text to a markup fragment."""
        return self.tree_renderer.render(self.tokenize(content))

    def render_to_string(self, content: str) -> str:
        """Render Markdown text to an HTML string."""
        return to_html(self.render(content))
