"""md2markup - Render Markdown into a nested markup tree.

md2markup tokenizes Markdown into a flat stream of events and folds that
stream back into an immutable tree of elements by bracket matching with
recursive descent. The tree serializes to HTML or JSON and is ready to be
mounted by a host page inside a styled container.

Key Features
------------
- CommonMark plus GitHub Flavored Markdown (tables, footnotes, task lists,
  strikethrough) via mistune
- Math, definition lists, superscript/subscript and front matter
- Two styling strategies: a bulk prose preset on the container, or explicit
  style classes on every element
- Code block theme presets and ``language-xxx`` classes for highlighters
- Rendering that is total over malformed event streams

Requirements
------------
- Python 3.10+
- mistune 3 for tokenizing Markdown text

Examples
--------
Render to an HTML fragment:

    >>> from md2markup import render_markdown, to_html
    >>> to_html(render_markdown("**bold**"))
    '<p><strong>bold</strong></p>'

Render into a mountable container, falling back to an error box on failure:

    >>> from md2markup import RenderOptions, markdown_view
    >>> view = markdown_view("# Title", class_name="article", options=RenderOptions(code_theme="github"))
    >>> view.tag
    'div'

Render an event stream directly:

    >>> from md2markup.events import EndElement, Paragraph, StartElement, Text
    >>> from md2markup import EventTreeRenderer
    >>> EventTreeRenderer().render_to_string([StartElement(Paragraph()), Text("Hi"), EndElement()])
    '<p>Hi</p>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2markup requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2markup.api import (
    content_container,
    error_box,
    markdown_to_html,
    markdown_view,
    render_markdown,
    render_markdown_string,
    render_markdown_with_options,
)
from md2markup.exceptions import (
    DependencyError,
    InvalidOptionsError,
    Md2MarkupError,
    RenderError,
    ValidationError,
)
from md2markup.markup import Element, Fragment, RawHtml, TextNode, markup_to_json, to_html
from md2markup.options import CodeTheme, RenderOptions
from md2markup.parsers import MarkdownEventParser, markdown_to_events
from md2markup.renderers import EventTreeRenderer, MarkdownRenderer
from md2markup.styles import StyleTarget, prose_classes, style_for, theme_style

__all__ = [
    "__version__",
    # Rendering
    "render_markdown",
    "render_markdown_string",
    "render_markdown_with_options",
    "markdown_view",
    "markdown_to_html",
    "content_container",
    "error_box",
    "markdown_to_events",
    "EventTreeRenderer",
    "MarkdownRenderer",
    "MarkdownEventParser",
    # Options and styles
    "RenderOptions",
    "CodeTheme",
    "StyleTarget",
    "style_for",
    "theme_style",
    "prose_classes",
    # Markup
    "Element",
    "Fragment",
    "RawHtml",
    "TextNode",
    "to_html",
    "markup_to_json",
    # Exceptions
    "Md2MarkupError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderError",
    "DependencyError",
]
