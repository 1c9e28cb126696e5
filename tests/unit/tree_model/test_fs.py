"""Tests for directory scanning and root validation."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from cli2text.tree_model import is_valid_directory, list_directory_children, safe_file_size


class IsValidDirectoryTests(unittest.TestCase):
    def test_existing_directory_is_valid(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertTrue(is_valid_directory(tmp))
            self.assertTrue(is_valid_directory(Path(tmp)))

    def test_missing_path_and_regular_file_are_invalid(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            regular = root / "file.txt"
            regular.write_text("x", encoding="utf-8")

            self.assertFalse(is_valid_directory(root / "missing"))
            self.assertFalse(is_valid_directory(regular))

    def test_malformed_path_is_invalid(self) -> None:
        self.assertFalse(is_valid_directory("bad\x00path"))


class ListDirectoryChildrenTests(unittest.TestCase):
    def test_lists_files_with_sizes_and_directories_without(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_bytes(b"12345")
            (root / "sub").mkdir()

            children, scan_error = list_directory_children(root)

            self.assertIsNone(scan_error)
            by_name = {child.name: child for child in children}
            self.assertEqual(set(by_name), {"a.txt", "sub"})
            self.assertFalse(by_name["a.txt"].is_dir)
            self.assertEqual(by_name["a.txt"].file_size, 5)
            self.assertEqual(by_name["a.txt"].path, root / "a.txt")
            self.assertTrue(by_name["sub"].is_dir)
            self.assertIsNone(by_name["sub"].file_size)

    def test_skip_name_filters_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "keep.txt").write_text("k", encoding="utf-8")
            (root / "drop.txt").write_text("d", encoding="utf-8")

            children, scan_error = list_directory_children(root, skip_name=lambda name: name == "drop.txt")

            self.assertIsNone(scan_error)
            self.assertEqual([child.name for child in children], ["keep.txt"])

    def test_missing_directory_returns_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            children, scan_error = list_directory_children(Path(tmp) / "gone")

            self.assertEqual(children, [])
            self.assertIsInstance(scan_error, FileNotFoundError)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_dangling_symlink_reports_stat_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            try:
                os.symlink(root / "nowhere", root / "dangling")
            except OSError:
                self.skipTest("cannot create symlinks")

            children, scan_error = list_directory_children(root)

            self.assertIsNone(scan_error)
            self.assertEqual(len(children), 1)
            self.assertFalse(children[0].is_dir)
            self.assertIsNone(children[0].file_size)
            self.assertIsInstance(children[0].stat_error, OSError)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlinked_directory_is_not_descended_as_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            try:
                os.symlink(root / "real", root / "link", target_is_directory=True)
            except OSError:
                self.skipTest("cannot create symlinks")

            children, _scan_error = list_directory_children(root)

            by_name = {child.name: child for child in children}
            self.assertTrue(by_name["real"].is_dir)
            self.assertFalse(by_name["link"].is_dir)
            self.assertIsNotNone(by_name["link"].file_size)

    def test_safe_file_size_returns_error_for_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            size, error = safe_file_size(Path(tmp) / "missing.bin")

            self.assertIsNone(size)
            self.assertIsInstance(error, FileNotFoundError)


if __name__ == "__main__":
    unittest.main()
