"""Domain datatypes for directory children observed during a scan."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryChild:
    """One non-ignored directory child plus the metadata the report needs.

    ``file_size`` is set for files whose size could be read; ``stat_error``
    holds the failure otherwise. Both stay ``None`` for directories.
    """

    name: str
    path: Path
    is_dir: bool
    file_size: int | None = None
    stat_error: OSError | None = None


@dataclass(frozen=True)
class SubtreeReadError:
    """A directory (or entry) that could not be read during traversal."""

    path: Path
    error: OSError

    @property
    def message(self) -> str:
        return f"Error while analyzing {self.path}: {self.error}"


__all__ = [
    "DirectoryChild",
    "SubtreeReadError",
]
