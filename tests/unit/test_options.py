#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for render options."""

from dataclasses import FrozenInstanceError, fields

import pytest

from md2markup.options import CodeTheme, RenderOptions


@pytest.mark.unit
class TestDefaults:
    """Test default option values."""

    def test_defaults(self):
        options = RenderOptions()
        assert options.enable_gfm is True
        assert options.code_theme is CodeTheme.DEFAULT
        assert options.emit_language_classes is True
        assert options.open_links_new_tab is True
        assert options.allow_raw_html is True
        assert options.use_explicit_styling is False
        assert options.enable_math is True
        assert options.enable_definition_lists is True
        assert options.enable_superscript_subscript is False
        assert options.enable_metadata_blocks is True

    def test_every_field_has_help(self):
        for option_field in fields(RenderOptions):
            assert option_field.metadata.get("help"), option_field.name

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            RenderOptions().enable_gfm = False


@pytest.mark.unit
class TestCodeTheme:
    """Test code theme normalization."""

    @pytest.mark.parametrize("name", ["github", "GitHub", " GITHUB "])
    def test_name_lookup(self, name):
        assert RenderOptions(code_theme=name).code_theme is CodeTheme.GITHUB

    def test_none_name_disables(self):
        assert RenderOptions(code_theme="none").code_theme is None
        assert RenderOptions(code_theme=None).code_theme is None

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown code theme"):
            RenderOptions(code_theme="solarized")

    def test_wrong_type(self):
        with pytest.raises(ValueError, match="code_theme must be"):
            RenderOptions(code_theme=3)

    def test_from_name(self):
        assert CodeTheme.from_name("monokai") is CodeTheme.MONOKAI
        assert CodeTheme.from_name("none") is None


@pytest.mark.unit
class TestBuilders:
    """Test the fluent builder methods."""

    def test_builders_return_new_instances(self):
        base = RenderOptions()
        updated = base.with_explicit_styling(True)
        assert updated is not base
        assert updated.use_explicit_styling is True
        assert base.use_explicit_styling is False

    def test_chained_builders(self):
        options = (
            RenderOptions()
            .with_gfm(False)
            .with_code_theme("dark")
            .with_language_classes(False)
            .with_new_tab_links(False)
            .with_allow_raw_html(False)
        )
        assert options == RenderOptions(
            enable_gfm=False,
            code_theme=CodeTheme.DARK,
            emit_language_classes=False,
            open_links_new_tab=False,
            allow_raw_html=False,
        )

    def test_without_code_theme(self):
        assert RenderOptions().without_code_theme().code_theme is None

    def test_create_updated(self):
        assert RenderOptions().create_updated(enable_math=False).enable_math is False
