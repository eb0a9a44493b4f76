#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/styles.py
"""Style tokens for rendered markup.

This module maps element kinds and configuration choices to class strings.
Two styling strategies exist, selected by
``RenderOptions.use_explicit_styling``:

- bulk preset (default): the wrapper container carries the prose preset from
  ``prose_classes()`` and elements only carry short semantic class names;
- explicit: every element carries its own Tailwind utility classes from
  ``MarkdownClasses``.

Every lookup is a pure function of its arguments. A target without a mapping
yields the empty string, never an error.

"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from md2markup.events.nodes import (
    BlockQuote,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    ElementKind,
    Emphasis,
    FootnoteDefinition,
    Heading,
    HtmlBlock,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableHead,
    TableRow,
)
from md2markup.options.markup import CodeTheme, RenderOptions


class StyleTarget(str, Enum):
    """Everything the renderer can attach a style token to."""

    PARAGRAPH = "paragraph"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    BLOCKQUOTE = "blockquote"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    CODE_BLOCK_CODE = "code_block_code"
    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    LIST_ITEM = "li"
    EMPHASIS = "em"
    STRONG = "strong"
    STRIKETHROUGH = "del"
    LINK = "link"
    IMAGE = "image"
    TABLE = "table"
    TABLE_HEAD = "thead"
    TABLE_ROW = "tr"
    TABLE_CELL = "td"
    TABLE_HEADER_CELL = "th"
    THEMATIC_BREAK = "hr"
    CHECKBOX = "checkbox"
    MATH_INLINE = "math_inline"
    MATH_DISPLAY = "math_display"
    DEFINITION_LIST = "dl"
    DEFINITION_TERM = "dt"
    DEFINITION_DESCRIPTION = "dd"
    SUPERSCRIPT = "sup"
    SUBSCRIPT = "sub"
    FOOTNOTE_REFERENCE = "footnote_ref"
    FOOTNOTE_DEFINITION = "footnote_def"
    RAW_HTML_BLOCK = "raw_html_block"
    INLINE_HTML = "inline_html"


class MarkdownClasses:
    """Tailwind CSS class names for markdown elements."""

    # Base wrapper
    CONTENT = "md2markup-content prose prose-gray max-w-none dark:prose-invert"

    # Headings
    H1 = "text-3xl font-bold text-gray-900 dark:text-gray-100 mt-6 mb-4 first:mt-0"
    H2 = "text-2xl font-semibold text-gray-900 dark:text-gray-100 mt-5 mb-3"
    H3 = "text-xl font-semibold text-gray-900 dark:text-gray-100 mt-4 mb-2"
    H4 = "text-lg font-medium text-gray-900 dark:text-gray-100 mt-3 mb-2"
    H5 = "text-base font-medium text-gray-900 dark:text-gray-100 mt-3 mb-2"
    H6 = "text-sm font-medium text-gray-600 dark:text-gray-400 mt-3 mb-2"

    # Text elements
    PARAGRAPH = "mb-4 leading-relaxed text-gray-700 dark:text-gray-300"
    BLOCKQUOTE = (
        "border-l-4 border-blue-500 pl-4 py-2 my-4 bg-blue-50 dark:bg-blue-950/30 "
        "text-gray-700 dark:text-gray-300 italic"
    )

    # Code
    INLINE_CODE = (
        "bg-gray-100 dark:bg-gray-800 text-gray-800 dark:text-gray-200 px-1.5 py-0.5 rounded text-sm font-mono"
    )
    CODE_BLOCK = (
        "bg-gray-50 dark:bg-gray-900 border border-gray-200 dark:border-gray-700 rounded-lg p-4 my-4 overflow-x-auto"
    )
    CODE_BLOCK_CODE = "font-mono text-sm leading-relaxed text-gray-800 dark:text-gray-200"

    # Lists
    UL = "list-disc list-inside mb-4 space-y-1 text-gray-700 dark:text-gray-300"
    OL = "list-decimal list-inside mb-4 space-y-1 text-gray-700 dark:text-gray-300"
    LI = "leading-relaxed"

    # Links and images
    LINK = (
        "text-blue-600 dark:text-blue-400 hover:text-blue-800 dark:hover:text-blue-300 "
        "underline underline-offset-2 hover:underline-offset-4 transition-all"
    )
    IMAGE = "max-w-full h-auto rounded-lg shadow-sm my-4"

    # Tables
    TABLE = (
        "min-w-full divide-y divide-gray-200 dark:divide-gray-700 my-4 border border-gray-200 "
        "dark:border-gray-700 rounded-lg overflow-hidden"
    )
    THEAD = "bg-gray-50 dark:bg-gray-800"
    TR = "bg-white dark:bg-gray-900 even:bg-gray-50 dark:even:bg-gray-800/50"
    TD = "px-6 py-4 text-sm text-gray-900 dark:text-gray-100"
    TH = "px-6 py-3 text-left text-xs font-medium text-gray-500 dark:text-gray-400 uppercase tracking-wider"

    # Other elements
    HR = "border-0 h-px bg-gradient-to-r from-transparent via-gray-300 dark:via-gray-600 to-transparent my-8"
    CHECKBOX = "mr-2 accent-blue-600"

    # Math
    MATH_INLINE = "font-serif italic text-gray-800 dark:text-gray-200"
    MATH_DISPLAY = (
        "font-serif italic text-center my-4 p-3 bg-gray-50 dark:bg-gray-800 rounded-lg text-gray-800 dark:text-gray-200"
    )

    # Definition lists
    DL = "my-4"
    DT = "font-semibold text-gray-900 dark:text-gray-100 mt-4 first:mt-0"
    DD = "ml-6 mb-2 text-gray-700 dark:text-gray-300"

    # Superscript/Subscript
    SUP = "text-xs align-super"
    SUB = "text-xs align-sub"

    # Emphasis
    EM = "italic"
    STRONG = "font-bold"
    DEL = "line-through text-gray-500 dark:text-gray-400"

    # Special elements
    FOOTNOTE_REF = (
        "text-xs align-super text-blue-600 dark:text-blue-400 hover:text-blue-800 dark:hover:text-blue-300"
    )
    FOOTNOTE_DEF = (
        "text-sm border-t border-gray-200 dark:border-gray-700 mt-8 pt-4 text-gray-600 dark:text-gray-400"
    )
    RAW_HTML_BLOCK = (
        "bg-yellow-50 dark:bg-yellow-950/30 border border-yellow-200 dark:border-yellow-800 rounded-lg p-3 my-4 "
        "font-mono text-sm text-yellow-800 dark:text-yellow-200 whitespace-pre-wrap"
    )
    INLINE_HTML = (
        "bg-yellow-100 dark:bg-yellow-900/50 text-yellow-800 dark:text-yellow-200 px-2 py-1 rounded text-xs "
        "font-mono border border-yellow-300 dark:border-yellow-700"
    )

    # Code block themes
    THEME_DEFAULT = "bg-gray-50 dark:bg-gray-900"
    THEME_DARK = "bg-gray-900 text-gray-100"
    THEME_LIGHT = "bg-white text-gray-900 border"
    THEME_GITHUB = "bg-[#f6f8fa] dark:bg-[#0d1117] text-[#24292f] dark:text-[#f0f6fc]"
    THEME_MONOKAI = "bg-[#272822] text-[#f8f8f2]"

    # Error fallback
    ERROR_BOX = (
        "bg-red-50 dark:bg-red-950/30 border border-red-200 dark:border-red-800 rounded-lg p-4 "
        "text-red-800 dark:text-red-200"
    )
    ERROR_TITLE = "font-medium"
    ERROR_MESSAGE = "text-sm mt-1"


EXPLICIT_STYLES: dict[StyleTarget, str] = {
    StyleTarget.PARAGRAPH: MarkdownClasses.PARAGRAPH,
    StyleTarget.H1: MarkdownClasses.H1,
    StyleTarget.H2: MarkdownClasses.H2,
    StyleTarget.H3: MarkdownClasses.H3,
    StyleTarget.H4: MarkdownClasses.H4,
    StyleTarget.H5: MarkdownClasses.H5,
    StyleTarget.H6: MarkdownClasses.H6,
    StyleTarget.BLOCKQUOTE: MarkdownClasses.BLOCKQUOTE,
    StyleTarget.INLINE_CODE: MarkdownClasses.INLINE_CODE,
    StyleTarget.CODE_BLOCK: MarkdownClasses.CODE_BLOCK,
    StyleTarget.CODE_BLOCK_CODE: MarkdownClasses.CODE_BLOCK_CODE,
    StyleTarget.UNORDERED_LIST: MarkdownClasses.UL,
    StyleTarget.ORDERED_LIST: MarkdownClasses.OL,
    StyleTarget.LIST_ITEM: MarkdownClasses.LI,
    StyleTarget.EMPHASIS: MarkdownClasses.EM,
    StyleTarget.STRONG: MarkdownClasses.STRONG,
    StyleTarget.STRIKETHROUGH: MarkdownClasses.DEL,
    StyleTarget.LINK: MarkdownClasses.LINK,
    StyleTarget.IMAGE: MarkdownClasses.IMAGE,
    StyleTarget.TABLE: MarkdownClasses.TABLE,
    StyleTarget.TABLE_HEAD: MarkdownClasses.THEAD,
    StyleTarget.TABLE_ROW: MarkdownClasses.TR,
    StyleTarget.TABLE_CELL: MarkdownClasses.TD,
    StyleTarget.TABLE_HEADER_CELL: MarkdownClasses.TH,
    StyleTarget.THEMATIC_BREAK: MarkdownClasses.HR,
    StyleTarget.CHECKBOX: MarkdownClasses.CHECKBOX,
    StyleTarget.MATH_INLINE: MarkdownClasses.MATH_INLINE,
    StyleTarget.MATH_DISPLAY: MarkdownClasses.MATH_DISPLAY,
    StyleTarget.DEFINITION_LIST: MarkdownClasses.DL,
    StyleTarget.DEFINITION_TERM: MarkdownClasses.DT,
    StyleTarget.DEFINITION_DESCRIPTION: MarkdownClasses.DD,
    StyleTarget.SUPERSCRIPT: MarkdownClasses.SUP,
    StyleTarget.SUBSCRIPT: MarkdownClasses.SUB,
    StyleTarget.FOOTNOTE_REFERENCE: MarkdownClasses.FOOTNOTE_REF,
    StyleTarget.FOOTNOTE_DEFINITION: MarkdownClasses.FOOTNOTE_DEF,
    StyleTarget.RAW_HTML_BLOCK: MarkdownClasses.RAW_HTML_BLOCK,
    StyleTarget.INLINE_HTML: MarkdownClasses.INLINE_HTML,
}

# Semantic hooks used with the bulk preset; targets not listed get no class
PRESET_STYLES: dict[StyleTarget, str] = {
    StyleTarget.BLOCKQUOTE: "markdown-blockquote",
    StyleTarget.INLINE_CODE: "inline-code",
    StyleTarget.CODE_BLOCK: "markdown-code-block",
    StyleTarget.IMAGE: "markdown-image",
    StyleTarget.TABLE: "markdown-table",
    StyleTarget.THEMATIC_BREAK: "markdown-hr",
    StyleTarget.MATH_INLINE: "math math-inline",
    StyleTarget.MATH_DISPLAY: "math math-display",
    StyleTarget.FOOTNOTE_REFERENCE: "footnote-ref",
    StyleTarget.FOOTNOTE_DEFINITION: "footnote-definition",
    StyleTarget.RAW_HTML_BLOCK: "raw-html-block",
    StyleTarget.INLINE_HTML: "raw-html",
}

THEME_STYLES: dict[CodeTheme, str] = {
    CodeTheme.DEFAULT: MarkdownClasses.THEME_DEFAULT,
    CodeTheme.DARK: MarkdownClasses.THEME_DARK,
    CodeTheme.LIGHT: MarkdownClasses.THEME_LIGHT,
    CodeTheme.GITHUB: MarkdownClasses.THEME_GITHUB,
    CodeTheme.MONOKAI: MarkdownClasses.THEME_MONOKAI,
}

HEADING_TARGETS = (
    StyleTarget.H1,
    StyleTarget.H2,
    StyleTarget.H3,
    StyleTarget.H4,
    StyleTarget.H5,
    StyleTarget.H6,
)

_KIND_TARGETS: dict[type, StyleTarget] = {
    Paragraph: StyleTarget.PARAGRAPH,
    BlockQuote: StyleTarget.BLOCKQUOTE,
    CodeBlock: StyleTarget.CODE_BLOCK,
    ListItem: StyleTarget.LIST_ITEM,
    Emphasis: StyleTarget.EMPHASIS,
    Strong: StyleTarget.STRONG,
    Strikethrough: StyleTarget.STRIKETHROUGH,
    Link: StyleTarget.LINK,
    Image: StyleTarget.IMAGE,
    Table: StyleTarget.TABLE,
    TableHead: StyleTarget.TABLE_HEAD,
    TableRow: StyleTarget.TABLE_ROW,
    TableCell: StyleTarget.TABLE_CELL,
    FootnoteDefinition: StyleTarget.FOOTNOTE_DEFINITION,
    HtmlBlock: StyleTarget.RAW_HTML_BLOCK,
    DefinitionList: StyleTarget.DEFINITION_LIST,
    DefinitionTerm: StyleTarget.DEFINITION_TERM,
    DefinitionDescription: StyleTarget.DEFINITION_DESCRIPTION,
    Superscript: StyleTarget.SUPERSCRIPT,
    Subscript: StyleTarget.SUBSCRIPT,
}


def target_for(kind: ElementKind) -> Optional[StyleTarget]:
    """Return the style target of an element kind, or None if it is never styled."""
    if isinstance(kind, Heading):
        return HEADING_TARGETS[kind.level - 1]
    if isinstance(kind, List):
        return StyleTarget.ORDERED_LIST if kind.ordered else StyleTarget.UNORDERED_LIST
    return _KIND_TARGETS.get(type(kind))


def style_for(target: Optional[StyleTarget], options: RenderOptions) -> str:
    """Return the style token for a target under the given options.

    Parameters
    ----------
    target : StyleTarget or None
        Element or leaf to style
    options : RenderOptions
        Only ``use_explicit_styling`` is consulted

    Returns
    -------
    str
        Class string; empty when the target has no token in the active strategy

    """
    if target is None:
        return ""
    table = EXPLICIT_STYLES if options.use_explicit_styling else PRESET_STYLES
    return table.get(target, "")


def style_for_kind(kind: ElementKind, options: RenderOptions) -> str:
    """Return the style token for an element kind under the given options."""
    return style_for(target_for(kind), options)


def theme_style(preset: CodeTheme) -> str:
    """Return the style token of a code block theme preset."""
    return THEME_STYLES.get(preset, "")


def prose_classes() -> str:
    """Return the bulk prose preset applied to the rendered content wrapper."""
    return (
        f"{MarkdownClasses.CONTENT} prose-headings:font-bold prose-headings:text-gray-900 "
        "dark:prose-headings:text-gray-100 prose-p:text-gray-700 dark:prose-p:text-gray-300 "
        "prose-a:text-blue-600 dark:prose-a:text-blue-400 prose-strong:text-gray-900 "
        "dark:prose-strong:text-gray-100 prose-code:text-gray-800 dark:prose-code:text-gray-200 "
        "prose-pre:bg-gray-50 dark:prose-pre:bg-gray-900"
    )


def join_classes(*tokens: Optional[str]) -> str:
    """Join non-empty class tokens with single spaces."""
    return " ".join(token for token in tokens if token)
