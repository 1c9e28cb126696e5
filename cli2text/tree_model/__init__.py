"""Domain model for scanned directory children.

This package contains non-UI scanning primitives:
- directory child and read-error datatypes
- directory listing returned as a ``(children, error)`` result
- root directory validation
"""

from __future__ import annotations

from .types import DirectoryChild, SubtreeReadError
from .fs import is_valid_directory, list_directory_children, safe_file_size

__all__ = [
    "DirectoryChild",
    "SubtreeReadError",
    "is_valid_directory",
    "list_directory_children",
    "safe_file_size",
]
