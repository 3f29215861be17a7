"""Command-line interface for the md2view rendering engine.

This module provides a small previewer that parses a Markdown file, renders
it to a presentation tree and prints the tree, either as an indented outline
(optionally drawn with Rich) or as JSON for snapshotting and host bridges.

Examples
--------
Outline of a document::

    $ md2view README.md

Explicit subcommand, reading from stdin::

    $ cat notes.md | md2view render -

JSON output with custom styles::

    $ md2view notes.md --format json --styles styles.toml

Single-line preview of an inline snippet::

    $ echo "**bold** and _em_" | md2view - --inline --render-inline

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from md2view import __version__
from md2view.api import render_markdown
from md2view.cli.config import load_style_file
from md2view.cli.output import format_plain_tree, print_rich_tree, should_use_rich_output
from md2view.constants import DEFAULT_BULLET_GLYPH, DEFAULT_MAX_DEPTH
from md2view.exceptions import (
    DependencyError,
    Md2ViewError,
    ParsingError,
    RenderingError,
    StyleConfigError,
    ValidationError,
)
from md2view.logging_utils import configure_logging, enable_render_diagnostics
from md2view.options.render import RenderConfig
from md2view.presentation.serialization import presentation_to_json

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

__all__ = [
    "main",
    "create_parser",
    "build_render_config",
    "get_exit_code_for_exception",
]


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``md2view`` command.

    Help text for render options is taken from the ``RenderConfig`` field
    metadata so the two stay in step.
    """
    field_help = RenderConfig.field_help()

    parser = argparse.ArgumentParser(
        prog="md2view",
        description="Render Markdown to a presentation tree and print it.",
        epilog="The optional leading 'render' subcommand is accepted for compatibility with scripts.",
    )
    parser.add_argument("input", help="Markdown file to render, or '-' to read from stdin")
    parser.add_argument("--version", action="version", version=f"md2view {__version__}")

    render_group = parser.add_argument_group("render options")
    render_group.add_argument("--inline", dest="parse_inline", action="store_true", help=field_help["parse_inline"])
    render_group.add_argument(
        "--styles",
        metavar="FILE",
        help="Style overrides from a JSON, YAML or TOML file (pyproject.toml: [tool.md2view.styles])",
    )
    render_group.add_argument(
        "--no-default-styles",
        dest="use_default_styles",
        action="store_false",
        help="Do not seed the style table with built-in defaults",
    )
    render_group.add_argument("--render-inline", action="store_true", help=field_help["render_inline"])
    render_group.add_argument(
        "--bullet", dest="bullet_glyph", default=DEFAULT_BULLET_GLYPH, help=field_help["bullet_glyph"]
    )
    render_group.add_argument(
        "--max-depth", type=_positive_int, default=DEFAULT_MAX_DEPTH, help=field_help["max_depth"]
    )
    render_group.add_argument(
        "--strict-depth",
        dest="fail_on_depth_exceeded",
        action="store_true",
        help=field_help["fail_on_depth_exceeded"],
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument("--format", choices=["tree", "json"], default="tree", help="Output form (default: tree)")
    output_group.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    output_group.add_argument("--out", "-o", metavar="FILE", help="Write output to FILE instead of stdout")
    output_group.add_argument("--rich", action="store_true", help="Draw the tree with Rich when writing to a terminal")
    output_group.add_argument(
        "--force-rich", action="store_true", help="Draw with Rich even when stdout is not a terminal"
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument("--debug", action="store_true", help=field_help["debug"])
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log output to this file")
    log_group.add_argument("--trace", action="store_true", help="Timestamped, logger-qualified log output")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    if parsed_args.trace or parsed_args.debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)
    if parsed_args.debug:
        enable_render_diagnostics()


def build_render_config(parsed_args: argparse.Namespace) -> RenderConfig:
    """Build the render configuration from parsed arguments.

    Raises
    ------
    StyleConfigError
        If the ``--styles`` file cannot be loaded
    ValidationError
        If the resulting configuration is invalid

    """
    markdown_styles = load_style_file(parsed_args.styles) if parsed_args.styles else {}
    try:
        return RenderConfig(
            debug=parsed_args.debug,
            use_default_styles=parsed_args.use_default_styles,
            markdown_styles=markdown_styles,
            parse_inline=parsed_args.parse_inline,
            render_inline=parsed_args.render_inline,
            bullet_glyph=parsed_args.bullet_glyph,
            max_depth=parsed_args.max_depth,
            fail_on_depth_exceeded=parsed_args.fail_on_depth_exceeded,
        )
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to the CLI exit code for its category."""
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, (StyleConfigError, OSError)):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _read_input(input_arg: str) -> bytes:
    if input_arg == "-":
        stream: Any = getattr(sys.stdin, "buffer", sys.stdin)
        data = stream.read()
        return data.encode("utf-8") if isinstance(data, str) else data
    return Path(input_arg).read_bytes()


def _write_output(content: str, out_path: Optional[str]) -> None:
    if out_path:
        Path(out_path).write_text(content + "\n", encoding="utf-8")
        logger.info("Wrote output to %s", out_path)
    else:
        print(content)


def main(args: list[str] | None = None) -> int:
    """Execute the md2view command line.

    Parameters
    ----------
    args : list of str, optional
        Argument vector without the program name; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    argv = list(sys.argv[1:] if args is None else args)
    if argv and argv[0] == "render":
        argv = argv[1:]

    parser = create_parser()
    parsed_args = parser.parse_args(argv)

    _setup_logging_level(parsed_args)

    try:
        source = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: could not read input {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        config = build_render_config(parsed_args)
        use_rich = (
            parsed_args.format == "tree"
            and not parsed_args.out
            and should_use_rich_output(parsed_args, raise_on_missing=parsed_args.force_rich)
        )
        nodes = render_markdown(source, config)
    except Md2ViewError as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if use_rich:
        print_rich_tree(nodes, title=parsed_args.input)
        return EXIT_SUCCESS

    if parsed_args.format == "json":
        content = presentation_to_json(nodes, indent=parsed_args.indent)
    else:
        content = format_plain_tree(nodes)

    try:
        _write_output(content, parsed_args.out)
    except OSError as e:
        print(f"Error: could not write output {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
