"""Filesystem scanning helpers for directory reports."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

from .types import DirectoryChild


def is_valid_directory(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` exists and is a directory.

    Stat failures (missing path, permission denied, malformed path) are
    reported as ``False``.
    """
    try:
        status = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(status.st_mode)


def safe_file_size(path: Path) -> tuple[int | None, OSError | None]:
    """Return ``(size, None)`` for ``path`` or ``(None, error)`` on stat failure.

    Symlinks are followed, so a link reports the size of its target.
    """
    try:
        return int(os.stat(path).st_size), None
    except OSError as exc:
        return None, exc


def list_directory_children(
    directory: Path,
    skip_name: Callable[[str], bool] | None = None,
) -> tuple[list[DirectoryChild], OSError | None]:
    """List children of ``directory`` in enumeration order.

    Returns ``(children, scan_error)``. ``scan_error`` is set, and
    ``children`` empty, when the directory cannot be scanned. Names for which
    ``skip_name`` returns true are left out. Entry types are read without
    following symlinks; file sizes follow them.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if skip_name is not None and skip_name(name):
                    continue
                child_path = directory / name

                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                if is_dir:
                    children.append(DirectoryChild(name=name, path=child_path, is_dir=True))
                    continue

                file_size, stat_error = safe_file_size(child_path)
                children.append(
                    DirectoryChild(
                        name=name,
                        path=child_path,
                        is_dir=False,
                        file_size=file_size,
                        stat_error=stat_error,
                    )
                )
    except OSError as exc:
        return [], exc

    return children, None


__all__ = [
    "is_valid_directory",
    "safe_file_size",
    "list_directory_children",
]
