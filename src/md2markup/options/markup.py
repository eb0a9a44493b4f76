#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/options/markup.py
"""Configuration options for rendering Markdown to markup trees.

This module defines the code theme presets and the immutable option set
shared by the tokenizer adapter and the EventTreeRenderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from md2markup.constants import (
    CODE_THEME_NONE,
    DEFAULT_ALLOW_RAW_HTML,
    DEFAULT_CODE_THEME,
    DEFAULT_EMIT_LANGUAGE_CLASSES,
    DEFAULT_ENABLE_DEFINITION_LISTS,
    DEFAULT_ENABLE_GFM,
    DEFAULT_ENABLE_MATH,
    DEFAULT_ENABLE_METADATA_BLOCKS,
    DEFAULT_ENABLE_SUPERSCRIPT_SUBSCRIPT,
    DEFAULT_OPEN_LINKS_NEW_TAB,
    DEFAULT_USE_EXPLICIT_STYLING,
)
from md2markup.options.base import CloneFrozenMixin


class CodeTheme(str, Enum):
    """Code block theme presets."""

    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"
    GITHUB = "github"
    MONOKAI = "monokai"

    @classmethod
    def from_name(cls, name: str) -> Optional["CodeTheme"]:
        """Look up a preset by case-insensitive name; ``"none"`` gives None.

        Raises
        ------
        ValueError
            If the name matches no preset

        """
        normalized = name.strip().lower()
        if normalized == CODE_THEME_NONE:
            return None
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join([theme.value for theme in cls] + [CODE_THEME_NONE])
            raise ValueError(f"Unknown code theme {name!r}; expected one of: {choices}") from None


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration options for rendering Markdown to a markup tree.

    All fields are independent and freely combinable.

    Parameters
    ----------
    enable_gfm : bool, default True
        Enable GitHub Flavored Markdown in the tokenizer: tables, footnotes,
        strikethrough, task lists and autolinks.
    code_theme : CodeTheme, str or None, default CodeTheme.DEFAULT
        Theme preset whose style token is appended to code block wrappers.
        A preset name is accepted; None (or "none") disables theme tokens,
        which is useful with external syntax highlighters.
    emit_language_classes : bool, default True
        Add ``language-xxx`` tokens to code blocks (``language-text`` when the
        block names no language), for highlighters like Prism or highlight.js.
    open_links_new_tab : bool, default True
        Give links ``target="_blank"`` and ``rel="noopener noreferrer"``.
    allow_raw_html : bool, default True
        Inject raw HTML from the document unescaped. When False, raw HTML is
        shown as literal text. This is a pass-through switch, not a sanitizer.
    use_explicit_styling : bool, default False
        Attach a specific style token to every element instead of relying on
        the bulk preset applied to the wrapper.
    enable_math : bool, default True
        Recognize ``$inline$`` and ``$$display$$`` math in the tokenizer.
    enable_definition_lists : bool, default True
        Recognize definition lists (``Term`` followed by ``: description``).
    enable_superscript_subscript : bool, default False
        Recognize ``^superscript^`` and ``~subscript~`` in the tokenizer.
    enable_metadata_blocks : bool, default True
        Recognize YAML (``---``) and TOML (``+++``) front matter. Metadata
        blocks are never rendered.

    Examples
    --------
        >>> options = RenderOptions(code_theme="github", open_links_new_tab=False)
        >>> options.code_theme
        <CodeTheme.GITHUB: 'github'>
        >>> RenderOptions().with_explicit_styling(True).use_explicit_styling
        True

    """

    enable_gfm: bool = field(
        default=DEFAULT_ENABLE_GFM,
        metadata={"help": "Enable GitHub Flavored Markdown (tables, footnotes, strikethrough, task lists)"},
    )
    code_theme: Union[CodeTheme, str, None] = field(
        default=CodeTheme(DEFAULT_CODE_THEME),
        metadata={
            "help": "Code block theme preset",
            "choices": [theme.value for theme in CodeTheme] + [CODE_THEME_NONE],
        },
    )
    emit_language_classes: bool = field(
        default=DEFAULT_EMIT_LANGUAGE_CLASSES,
        metadata={"help": "Add language-xxx classes to code blocks for external highlighters"},
    )
    open_links_new_tab: bool = field(
        default=DEFAULT_OPEN_LINKS_NEW_TAB,
        metadata={"help": "Open links in a new tab (target=_blank, rel=noopener noreferrer)"},
    )
    allow_raw_html: bool = field(
        default=DEFAULT_ALLOW_RAW_HTML,
        metadata={"help": "Inject raw HTML unescaped instead of showing it as text"},
    )
    use_explicit_styling: bool = field(
        default=DEFAULT_USE_EXPLICIT_STYLING,
        metadata={"help": "Attach explicit style classes to every element instead of the wrapper preset"},
    )
    enable_math: bool = field(
        default=DEFAULT_ENABLE_MATH,
        metadata={"help": "Recognize $inline$ and $$display$$ math"},
    )
    enable_definition_lists: bool = field(
        default=DEFAULT_ENABLE_DEFINITION_LISTS,
        metadata={"help": "Recognize definition lists"},
    )
    enable_superscript_subscript: bool = field(
        default=DEFAULT_ENABLE_SUPERSCRIPT_SUBSCRIPT,
        metadata={"help": "Recognize ^superscript^ and ~subscript~"},
    )
    enable_metadata_blocks: bool = field(
        default=DEFAULT_ENABLE_METADATA_BLOCKS,
        metadata={"help": "Recognize YAML/TOML front matter (never rendered)"},
    )

    def __post_init__(self) -> None:
        """Normalize the code theme.

        Raises
        ------
        ValueError
            If ``code_theme`` is not a CodeTheme, a preset name or None.

        """
        theme = self.code_theme
        if theme is None or isinstance(theme, CodeTheme):
            return
        if isinstance(theme, str):
            object.__setattr__(self, "code_theme", CodeTheme.from_name(theme))
            return
        raise ValueError(f"code_theme must be a CodeTheme, a preset name or None, got {type(theme).__name__}")

    def with_gfm(self, enable: bool) -> RenderOptions:
        """Enable or disable GitHub Flavored Markdown features."""
        return self.create_updated(enable_gfm=enable)

    def with_code_theme(self, theme: Union[CodeTheme, str]) -> RenderOptions:
        """Set the code block theme preset."""
        return self.create_updated(code_theme=theme)

    def without_code_theme(self) -> RenderOptions:
        """Disable code block theme tokens (useful with external highlighters)."""
        return self.create_updated(code_theme=None)

    def with_language_classes(self, enable: bool) -> RenderOptions:
        """Enable or disable ``language-xxx`` classes on code blocks."""
        return self.create_updated(emit_language_classes=enable)

    def with_new_tab_links(self, enable: bool) -> RenderOptions:
        """Configure whether links open in new tabs."""
        return self.create_updated(open_links_new_tab=enable)

    def with_allow_raw_html(self, enable: bool) -> RenderOptions:
        """Configure whether raw HTML in markdown is injected unescaped."""
        return self.create_updated(allow_raw_html=enable)

    def with_explicit_styling(self, enable: bool) -> RenderOptions:
        """Use explicit per-element style classes instead of the wrapper preset."""
        return self.create_updated(use_explicit_styling=enable)
