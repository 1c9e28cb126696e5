"""Command-line front door for cli2text.

Parses CLI options, validates the root directory, and runs the report walk.
Then writes the compiled report to ``output.txt`` in the working directory.
"""

from __future__ import annotations

import argparse
import sys

from .config import load_color_enabled, load_theme_name, save_theme_name
from .console import ReportConsole, sanitize_terminal_text, stream_supports_color
from .report import DEFAULT_OUTPUT, CompiledReport, process_tree, write_report
from .tree_model import is_valid_directory
from .ui_theme import available_theme_names, resolve_theme

EXIT_OK = 0
EXIT_INVALID_ROOT = 1
EXIT_WRITE_FAILED = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli2text",
        description=f"Print a directory tree with file sizes and save it to {DEFAULT_OUTPUT}.",
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to analyze. Defaults to '.'.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Console theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--save-theme", action="store_true", help="Remember --theme for later runs.")
    return parser


def build_console(theme_name: str | None, no_color: bool) -> ReportConsole:
    """Resolve the console palette from flags, stored config, and the TTY state."""
    color = not no_color and load_color_enabled() and stream_supports_color(sys.stdout)
    if theme_name is None:
        theme_name = load_theme_name()
    return ReportConsole(resolve_theme(theme_name, no_color=not color), out=sys.stdout, err=sys.stderr)


def run(directory: str, console: ReportConsole) -> int:
    """Analyze ``directory``, persist the report, and return an exit status."""
    shown = sanitize_terminal_text(directory)
    console.banner(f"Analyzing directory: {shown}\n")

    if not is_valid_directory(directory):
        console.error(f'Error: the specified path "{shown}" is not a valid directory.')
        return EXIT_INVALID_ROOT

    report = process_tree(
        directory,
        "",
        CompiledReport(),
        emit=console.report_line,
        on_error=console.read_error,
    )

    write_error = write_report(report, DEFAULT_OUTPUT)
    if write_error is not None:
        console.error(f"Error: {write_error}")
        return EXIT_WRITE_FAILED

    console.success(f'\nAnalysis completed. Results saved in "{DEFAULT_OUTPUT}"')
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and produce the directory report.

    Exits with a non-zero status when the root is not a directory or the
    report cannot be written.
    """
    args = build_parser().parse_args(argv)

    if args.save_theme:
        if args.theme is None:
            raise SystemExit("--save-theme requires --theme.")
        theme_name = args.theme.strip().lower()
        if theme_name not in available_theme_names():
            raise SystemExit(f"Unknown theme: {args.theme!r} (choose from {', '.join(available_theme_names())}).")
        save_theme_name(theme_name)

    console = build_console(args.theme, args.no_color)
    status = run(args.directory, console)
    if status != EXIT_OK:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
