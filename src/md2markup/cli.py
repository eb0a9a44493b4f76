#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2markup/cli.py
"""Command-line interface for md2markup.

Renders a Markdown file (or standard input) to HTML or to the JSON form of
the markup tree.

Environment Variable Support
----------------------------
``MD2MARKUP_LOG_LEVEL`` sets the default for ``--log-level``. CLI arguments
always override environment variables.

Examples
--------
Render a file to standard output::

    $ md2markup README.md

Write a bare fragment with explicit element styling::

    $ md2markup README.md --fragment --explicit-styling --out readme.html

Read from standard input and emit the markup tree as JSON::

    $ cat notes.md | md2markup - --format json

Pretty-print the HTML in the terminal::

    $ md2markup README.md --rich

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, get_args

from md2markup import __version__
from md2markup.api import content_container, render_markdown
from md2markup.constants import CODE_THEME_NONE, OutputFormat
from md2markup.exceptions import Md2MarkupError
from md2markup.logging_utils import configure_logging, default_log_level
from md2markup.markup import Fragment, Markup, markup_to_json, to_html
from md2markup.options.markup import CodeTheme, RenderOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_FILE_ERROR = 4


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (OSError, UnicodeDecodeError)):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the md2markup command."""
    parser = argparse.ArgumentParser(
        prog="md2markup",
        description="Render Markdown to HTML markup.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to render, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--format",
        choices=list(get_args(OutputFormat)),
        default="html",
        help="Output HTML text or the markup tree as JSON (default: html)",
    )
    parser.add_argument("--class", dest="class_name", help="Extra classes for the content container")
    parser.add_argument("--fragment", action="store_true", help="Emit the bare fragment without the container")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    markdown_group = parser.add_argument_group("Markdown options")
    markdown_group.add_argument(
        "--no-gfm", dest="enable_gfm", action="store_false", help="Disable GitHub Flavored Markdown extensions"
    )
    markdown_group.add_argument(
        "--no-math", dest="enable_math", action="store_false", help="Disable $inline$ and $$display$$ math"
    )
    markdown_group.add_argument(
        "--superscript-subscript",
        dest="enable_superscript_subscript",
        action="store_true",
        help="Recognize ^superscript^ and ~subscript~",
    )

    render_group = parser.add_argument_group("Rendering options")
    render_group.add_argument(
        "--code-theme",
        choices=[theme.value for theme in CodeTheme] + [CODE_THEME_NONE],
        default=CodeTheme.DEFAULT.value,
        help="Code block theme preset (default: default)",
    )
    render_group.add_argument(
        "--no-language-classes",
        dest="emit_language_classes",
        action="store_false",
        help="Do not add language-xxx classes to code blocks",
    )
    render_group.add_argument(
        "--same-tab-links",
        dest="open_links_new_tab",
        action="store_false",
        help="Do not open links in a new tab",
    )
    render_group.add_argument(
        "--escape-html",
        dest="allow_raw_html",
        action="store_false",
        help="Show raw HTML from the document as text instead of injecting it",
    )
    render_group.add_argument(
        "--explicit-styling",
        dest="use_explicit_styling",
        action="store_true",
        help="Attach explicit style classes to every element",
    )

    output_group = parser.add_argument_group("Output and logging")
    output_group.add_argument(
        "--rich", action="store_true", help="Pretty-print output with syntax highlighting (requires rich)"
    )
    output_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=default_log_level(),
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    output_group.add_argument("--log-file", help="Also write log messages to this file")
    output_group.add_argument("--trace", action="store_true", help="Verbose DEBUG logging with timestamps")

    return parser


def build_options(parsed_args: argparse.Namespace) -> RenderOptions:
    """Create render options from parsed command-line arguments."""
    return RenderOptions(
        enable_gfm=parsed_args.enable_gfm,
        code_theme=parsed_args.code_theme,
        emit_language_classes=parsed_args.emit_language_classes,
        open_links_new_tab=parsed_args.open_links_new_tab,
        allow_raw_html=parsed_args.allow_raw_html,
        use_explicit_styling=parsed_args.use_explicit_styling,
        enable_math=parsed_args.enable_math,
        enable_superscript_subscript=parsed_args.enable_superscript_subscript,
    )


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _serialize(markup: Markup | Fragment, output_format: OutputFormat) -> str:
    if output_format == "json":
        return markup_to_json(markup, indent=2)
    return to_html(markup)


def should_use_rich_output(parsed_args: argparse.Namespace, stream: Optional[object] = None) -> bool:
    """Determine if Rich output should be used.

    Rich output is used when ``--rich`` is set, no output file is given,
    the target stream is a TTY and the rich library is installed.
    """
    if not parsed_args.rich or parsed_args.out:
        return False

    try:
        import rich  # noqa: F401
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install md2markup[rich]", file=sys.stderr)
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def _print_rich(text: str, output_format: OutputFormat) -> None:
    from rich.console import Console
    from rich.syntax import Syntax

    Console().print(Syntax(text, output_format, word_wrap=True))


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the md2markup command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        content = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {parsed_args.input}: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    try:
        fragment = render_markdown(content, options)
    except Md2MarkupError as e:
        logger.error("Failed to render markdown: %s", e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    markup: Markup | Fragment = fragment if parsed_args.fragment else content_container(fragment, parsed_args.class_name)
    text = _serialize(markup, parsed_args.format)

    if parsed_args.out:
        try:
            Path(parsed_args.out).write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write {parsed_args.out}: {e}", file=sys.stderr)
            return get_exit_code_for_exception(e)
        logger.info("Wrote %s output to %s", parsed_args.format, parsed_args.out)
        return EXIT_SUCCESS

    if should_use_rich_output(parsed_args):
        _print_rich(text, parsed_args.format)
    else:
        print(text)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
