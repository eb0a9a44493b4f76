#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for style token lookup."""

import itertools

import pytest

from md2markup.events import (
    BlockQuote,
    CodeBlock,
    Fenced,
    Heading,
    HtmlBlock,
    List,
    MetadataBlock,
    Paragraph,
)
from md2markup.options import CodeTheme, RenderOptions
from md2markup.styles import (
    EXPLICIT_STYLES,
    HEADING_TARGETS,
    MarkdownClasses,
    StyleTarget,
    join_classes,
    prose_classes,
    style_for,
    style_for_kind,
    target_for,
    theme_style,
)

PRESET = RenderOptions()
EXPLICIT = RenderOptions(use_explicit_styling=True)


@pytest.mark.unit
class TestStyleFor:
    """Test the two styling strategies."""

    def test_every_target_has_explicit_style(self):
        for target in StyleTarget:
            assert style_for(target, EXPLICIT), f"No explicit style for {target}"

    def test_explicit_styles_cover_all_targets(self):
        assert set(EXPLICIT_STYLES) == set(StyleTarget)

    def test_paragraph_has_no_preset_class(self):
        assert style_for(StyleTarget.PARAGRAPH, PRESET) == ""
        assert style_for(StyleTarget.PARAGRAPH, EXPLICIT) == MarkdownClasses.PARAGRAPH

    @pytest.mark.parametrize(
        "target,expected",
        [
            (StyleTarget.BLOCKQUOTE, "markdown-blockquote"),
            (StyleTarget.INLINE_CODE, "inline-code"),
            (StyleTarget.CODE_BLOCK, "markdown-code-block"),
            (StyleTarget.IMAGE, "markdown-image"),
            (StyleTarget.TABLE, "markdown-table"),
            (StyleTarget.THEMATIC_BREAK, "markdown-hr"),
            (StyleTarget.MATH_INLINE, "math math-inline"),
            (StyleTarget.MATH_DISPLAY, "math math-display"),
        ],
    )
    def test_preset_semantic_classes(self, target, expected):
        assert style_for(target, PRESET) == expected

    def test_none_target_is_empty(self):
        assert style_for(None, EXPLICIT) == ""

    def test_lookup_is_pure(self):
        assert style_for(StyleTarget.H2, EXPLICIT) == style_for(StyleTarget.H2, EXPLICIT)


@pytest.mark.unit
class TestStyleForKind:
    """Test element kind to target mapping."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_heading_levels(self, level):
        assert target_for(Heading(level=level)) == HEADING_TARGETS[level - 1]

    def test_heading_levels_are_distinct(self):
        styles = [style_for_kind(Heading(level=level), EXPLICIT) for level in range(1, 7)]
        assert len(set(styles)) == 6

    def test_list_ordering(self):
        assert target_for(List(start=1)) == StyleTarget.ORDERED_LIST
        assert target_for(List()) == StyleTarget.UNORDERED_LIST
        assert style_for_kind(List(start=2), EXPLICIT) == MarkdownClasses.OL

    def test_other_kinds(self):
        assert target_for(Paragraph()) == StyleTarget.PARAGRAPH
        assert target_for(BlockQuote()) == StyleTarget.BLOCKQUOTE
        assert target_for(CodeBlock(kind=Fenced(language="py"))) == StyleTarget.CODE_BLOCK
        assert target_for(HtmlBlock()) == StyleTarget.RAW_HTML_BLOCK

    def test_metadata_block_is_never_styled(self):
        assert target_for(MetadataBlock()) is None
        assert style_for_kind(MetadataBlock(), EXPLICIT) == ""


@pytest.mark.unit
class TestThemeStyle:
    """Test code theme presets."""

    def test_every_preset_has_a_token(self):
        for preset in CodeTheme:
            assert theme_style(preset)

    def test_presets_are_pairwise_distinct(self):
        for first, second in itertools.combinations(CodeTheme, 2):
            assert theme_style(first) != theme_style(second)

    def test_known_tokens(self):
        assert theme_style(CodeTheme.DEFAULT) == MarkdownClasses.THEME_DEFAULT
        assert theme_style(CodeTheme.GITHUB) == MarkdownClasses.THEME_GITHUB


@pytest.mark.unit
class TestHelpers:
    """Test class string helpers."""

    def test_join_classes_skips_empty(self):
        assert join_classes("a", "", None, "b") == "a b"
        assert join_classes() == ""

    def test_prose_classes_start_with_content(self):
        assert prose_classes().startswith(MarkdownClasses.CONTENT)
        assert "prose" in prose_classes().split()
