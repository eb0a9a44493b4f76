"""Unit tests for the md2markup command-line interface.

This module tests argument parsing, option mapping, exit codes and the
output formats of the ``md2markup`` command.
"""

import io
import json
import logging
from typing import get_args
from unittest.mock import Mock

import pytest

from md2markup.cli import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    build_options,
    create_parser,
    get_exit_code_for_exception,
    main,
    should_use_rich_output,
)
from md2markup.constants import OutputFormat
from md2markup.exceptions import RenderError
from md2markup.logging_utils import (
    LOG_LEVEL_ENV_VAR,
    PACKAGE_LOGGER_NAME,
    configure_logging,
    default_log_level,
    resolve_log_level,
)
from md2markup.options import CodeTheme
from md2markup.styles import prose_classes


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers the CLI attaches so they do not outlive captured streams."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParsing:
    """Test parser construction and option mapping."""

    def test_defaults_match_render_options(self):
        """Test that the default arguments build default options."""
        parsed_args = create_parser().parse_args([])
        options = build_options(parsed_args)

        assert parsed_args.input == "-"
        assert options.enable_gfm is True
        assert options.code_theme is CodeTheme.DEFAULT
        assert options.open_links_new_tab is True

    def test_flags_map_to_options(self):
        """Test that each rendering flag reaches the options object."""
        parsed_args = create_parser().parse_args(
            [
                "doc.md",
                "--no-gfm",
                "--no-math",
                "--superscript-subscript",
                "--code-theme",
                "none",
                "--no-language-classes",
                "--same-tab-links",
                "--escape-html",
                "--explicit-styling",
            ]
        )
        options = build_options(parsed_args)

        assert options.enable_gfm is False
        assert options.enable_math is False
        assert options.enable_superscript_subscript is True
        assert options.code_theme is None
        assert options.emit_language_classes is False
        assert options.open_links_new_tab is False
        assert options.allow_raw_html is False
        assert options.use_explicit_styling is True

    def test_log_level_is_case_insensitive(self):
        assert create_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_invalid_format_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--format", "pdf"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("output_format", get_args(OutputFormat))
    def test_every_output_format_accepted(self, output_format):
        assert create_parser().parse_args(["--format", output_format]).format == output_format

    def test_invalid_code_theme_exits(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--code-theme", "solarized"])


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    def test_file_errors(self):
        assert get_exit_code_for_exception(FileNotFoundError("x")) == EXIT_FILE_ERROR
        assert get_exit_code_for_exception(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad")) == EXIT_FILE_ERROR

    def test_render_errors(self):
        assert get_exit_code_for_exception(RenderError("failed")) == EXIT_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test running the command end to end."""

    def test_render_file_to_stdout(self, markdown_file, capsys):
        """Test rendering a file wrapped in the content container."""
        assert main([str(markdown_file)]) == EXIT_SUCCESS

        output = capsys.readouterr().out
        assert output.startswith(f'<div class="{prose_classes()}">')
        assert "<h1>Sample Document</h1>" in output

    def test_fragment_with_class_ignored(self, markdown_file, capsys):
        assert main([str(markdown_file), "--fragment", "--class", "extra"]) == EXIT_SUCCESS

        output = capsys.readouterr().out
        assert output.startswith("<h1>Sample Document</h1>")
        assert "extra" not in output

    def test_container_class(self, markdown_file, capsys):
        main([str(markdown_file), "--class", "my-doc"])
        assert f'class="{prose_classes()} my-doc"' in capsys.readouterr().out

    def test_read_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("*hi*"))
        assert main(["-", "--fragment"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<p><em>hi</em></p>\n"

    def test_json_output(self, markdown_file, capsys):
        """Test that JSON output is a list holding the container element."""
        assert main([str(markdown_file), "--format", "json"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert isinstance(data, list)
        assert data[0]["tag"] == "div"
        assert data[0]["children"][0] == {
            "node_type": "Element",
            "tag": "h1",
            "children": [{"node_type": "TextNode", "text": "Sample Document"}],
        }

    def test_write_output_file(self, markdown_file, tmp_path, capsys):
        out_path = tmp_path / "out.html"
        assert main([str(markdown_file), "--fragment", "--out", str(out_path)]) == EXIT_SUCCESS

        assert capsys.readouterr().out == ""
        content = out_path.read_text(encoding="utf-8")
        assert content.startswith("<h1>Sample Document</h1>")
        assert content.endswith("\n")

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.md")]) == EXIT_FILE_ERROR
        assert "Could not read" in capsys.readouterr().err

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9 \xff")
        assert main([str(path)]) == EXIT_FILE_ERROR

    def test_log_file(self, markdown_file, tmp_path):
        log_path = tmp_path / "md2markup.log"
        out_path = tmp_path / "out.html"
        main([str(markdown_file), "--log-level", "INFO", "--log-file", str(log_path), "--out", str(out_path)])
        assert "Wrote html output" in log_path.read_text(encoding="utf-8")


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingSetup:
    """Test the logging helpers used by the CLI."""

    def test_default_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert default_log_level() == "DEBUG"

        monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
        assert default_log_level() == "WARNING"

    def test_resolve_log_level(self):
        assert resolve_log_level("info") == logging.INFO
        assert resolve_log_level(logging.ERROR) == logging.ERROR
        assert resolve_log_level("chatty") == logging.WARNING

    def test_reconfiguring_replaces_handlers(self):
        configure_logging("INFO")
        package_logger = configure_logging("DEBUG", trace_mode=True)

        assert package_logger.name == PACKAGE_LOGGER_NAME
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is True


@pytest.mark.unit
@pytest.mark.cli
class TestRichOutput:
    """Test the rich output decision."""

    def _args(self, rich=True, out=None):
        parsed_args = Mock()
        parsed_args.rich = rich
        parsed_args.out = out
        return parsed_args

    def test_disabled_without_flag(self):
        assert should_use_rich_output(self._args(rich=False)) is False

    def test_disabled_with_output_file(self):
        assert should_use_rich_output(self._args(out="out.html")) is False

    def test_requires_tty(self):
        pytest.importorskip("rich")
        stream = Mock()
        stream.isatty.return_value = False
        assert should_use_rich_output(self._args(), stream) is False

        stream.isatty.return_value = True
        assert should_use_rich_output(self._args(), stream) is True
