"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from html import unescape as _html_unescape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return _html_escape(value, quote=True)


def unescape_html(text: str) -> str:
    """Decode named and numeric character references such as ``&amp;`` and ``&#169;``."""
    return _html_unescape(text)


__all__ = ["escape_html", "escape_attribute", "unescape_html"]
