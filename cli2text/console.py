"""Colorized console sink for report rows, banners and errors.

Informational output goes to ``stdout`` and errors to ``stderr``. Entry names
are escaped for the terminal here only; the persisted report keeps raw names.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .report import ReportLine
from .tree_model import SubtreeReadError
from .ui_theme import PLAIN_THEME, UITheme

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def stream_supports_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


class ReportConsole:
    """Write themed lines to an output and an error stream."""

    def __init__(
        self,
        theme: UITheme = PLAIN_THEME,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.theme = theme
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def _write(self, stream: TextIO, color: str, text: str) -> None:
        if color:
            stream.write(f"{color}{text}{self.theme.reset}\n")
        else:
            stream.write(f"{text}\n")
        stream.flush()

    def banner(self, text: str) -> None:
        self._write(self.out, self.theme.banner, text)

    def success(self, text: str) -> None:
        self._write(self.out, self.theme.success, text)

    def error(self, text: str) -> None:
        self._write(self.err, self.theme.error, text)

    def report_line(self, line: ReportLine) -> None:
        """Print one report row in the directory or file color."""
        color = self.theme.tree_dir if line.is_dir else self.theme.tree_file
        self._write(self.out, color, sanitize_terminal_text(line.text))

    def read_error(self, read_error: SubtreeReadError) -> None:
        self.error(sanitize_terminal_text(read_error.message))


__all__ = [
    "ReportConsole",
    "sanitize_terminal_text",
    "stream_supports_color",
]
