"""Build the textual directory report and persist it.

A report is a pre-order, depth-first listing of every non-ignored entry under
a root directory. Lines are handed to an ``emit`` callback as soon as they are
discovered (the console sink) and also collected in a ``CompiledReport``
which the CLI writes to ``output.txt`` once the walk is finished.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from .tree_model import DirectoryChild, SubtreeReadError, list_directory_children

IGNORED_NAMES = frozenset({"node_modules", ".git", "package-lock.json", "output.txt"})
DEFAULT_OUTPUT = "output.txt"
INDENT_STEP = "   "
DIR_MARKER = "📂"
FILE_MARKER = "📄"
SIZE_UNITS = ("B", "KB", "MB", "GB")
ONE_DECIMAL = Decimal("0.1")


def format_size(size_bytes: float) -> str:
    """Format a byte count as ``"<value> <unit>"`` with one decimal digit.

    Exact ties round up (1280 bytes is ``"1.3 KB"``).
    """
    value = float(size_bytes)
    unit_idx = 0
    while value >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_idx += 1
    rounded = Decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{rounded} {SIZE_UNITS[unit_idx]}"


def should_ignore(name: str) -> bool:
    return name in IGNORED_NAMES


@dataclass(frozen=True)
class ReportLine:
    """One formatted report row."""

    indent: str
    name: str
    is_dir: bool
    size_label: str | None = None

    @property
    def text(self) -> str:
        if self.is_dir:
            return f"{self.indent}{DIR_MARKER} {self.name}"
        return f"{self.indent}{FILE_MARKER} {self.name} ({self.size_label})"


@dataclass
class CompiledReport:
    """Ordered report lines plus read failures collected during one walk."""

    lines: list[ReportLine] = field(default_factory=list)
    errors: list[SubtreeReadError] = field(default_factory=list)

    def append(self, line: ReportLine) -> None:
        self.lines.append(line)

    def render(self) -> str:
        """Join line texts with ``\\n`` (no trailing newline)."""
        return "\n".join(line.text for line in self.lines)


def line_for_child(child: DirectoryChild, indent: str) -> ReportLine:
    if child.is_dir:
        return ReportLine(indent=indent, name=child.name, is_dir=True)
    return ReportLine(
        indent=indent,
        name=child.name,
        is_dir=False,
        size_label=format_size(child.file_size or 0),
    )


def process_tree(
    directory: str | os.PathLike[str],
    indent: str = "",
    compiled: CompiledReport | None = None,
    *,
    emit: Callable[[ReportLine], None] | None = None,
    on_error: Callable[[SubtreeReadError], None] | None = None,
) -> CompiledReport:
    """Walk ``directory`` depth-first and append one line per visible entry.

    ``compiled`` is shared with the caller when given. A directory that cannot
    be listed is recorded in ``compiled.errors`` and its subtree is skipped;
    the walk then continues with the next sibling. The walk keeps an explicit
    stack of pending iterators instead of recursing, so depth is bounded only
    by memory.
    """
    report = compiled if compiled is not None else CompiledReport()

    def record_error(path: Path, error: OSError) -> None:
        read_error = SubtreeReadError(path=path, error=error)
        report.errors.append(read_error)
        if on_error is not None:
            on_error(read_error)

    def open_directory(path: Path, child_indent: str) -> tuple[Iterator[DirectoryChild], str] | None:
        children, scan_error = list_directory_children(path, skip_name=should_ignore)
        if scan_error is not None:
            record_error(path, scan_error)
            return None
        return iter(children), child_indent

    root_frame = open_directory(Path(directory), indent)
    if root_frame is None:
        return report
    pending = [root_frame]

    while pending:
        children, current_indent = pending[-1]
        child = next(children, None)
        if child is None:
            pending.pop()
            continue

        if not child.is_dir and child.stat_error is not None:
            record_error(child.path, child.stat_error)
            continue

        line = line_for_child(child, current_indent)
        report.append(line)
        if emit is not None:
            emit(line)

        if child.is_dir:
            frame = open_directory(child.path, current_indent + INDENT_STEP)
            if frame is not None:
                pending.append(frame)

    return report


def write_report(report: CompiledReport, output_path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> OSError | None:
    """Overwrite ``output_path`` with the rendered report as UTF-8 text.

    Returns the write failure instead of raising it.
    """
    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(report.render())
    except OSError as exc:
        return exc
    return None


__all__ = [
    "IGNORED_NAMES",
    "DEFAULT_OUTPUT",
    "INDENT_STEP",
    "ReportLine",
    "CompiledReport",
    "format_size",
    "should_ignore",
    "line_for_child",
    "process_tree",
    "write_report",
]
