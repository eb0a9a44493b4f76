#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/parsers/__init__.py
"""Tokenizers that turn Markdown text into flat event streams."""

from md2markup.parsers.markdown import MarkdownEventParser, markdown_to_events

__all__ = ["MarkdownEventParser", "markdown_to_events"]
