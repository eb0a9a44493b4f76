#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2markup/renderers/__init__.py
"""Renderers that fold Markdown event streams into markup trees.

Available renderers:
- EventTreeRenderer: Render a flat event stream to a markup fragment
- MarkdownRenderer: Tokenize Markdown text and render it (requires mistune)

Examples
--------
    >>> from md2markup.events import EndElement, Paragraph, StartElement, Text
    >>> from md2markup.renderers import EventTreeRenderer
    >>> EventTreeRenderer().render_to_string([StartElement(Paragraph()), Text("Hi"), EndElement()])
    '<p>Hi</p>'

"""

from md2markup.renderers.base import BaseRenderer
from md2markup.renderers.markup import EventTreeRenderer, MarkdownRenderer, find_matching_end

__all__ = [
    "BaseRenderer",
    "EventTreeRenderer",
    "MarkdownRenderer",
    "find_matching_end",
]
