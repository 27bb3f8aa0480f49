"""Tests for the index loader and the crawler page directory."""

import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from Querier.storage import (
    IndexFileError,
    IndexFormatError,
    InvertedIndex,
    PageDirectory,
    PageDirectoryError,
    check_index_file,
    check_page_directory,
    create_storage,
    load_index,
    parse_index_line,
)


class TestParseIndexLine(unittest.TestCase):
    def test_parses_pairs(self) -> None:
        self.assertEqual(parse_index_line("home 1 2 3 1\n"), ("home", {1: 2, 3: 1}))

    def test_lowercases_word(self) -> None:
        self.assertEqual(parse_index_line("Home 4 1"), ("home", {4: 1}))

    def test_blank_line(self) -> None:
        self.assertIsNone(parse_index_line("   \n"))

    def test_rejects_malformed_lines(self) -> None:
        for line in ("home", "home 1", "home 1 2 3", "h0me 1 1", "home x 1", "home 1 -2", "home 0 1"):
            with self.subTest(line=line):
                with self.assertRaises(IndexFormatError):
                    parse_index_line(line)


class TestLoadIndex(unittest.TestCase):
    def test_loads_and_skips_malformed_lines(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "letters.index"
            path.write_text(
                "algorithm 2 1\n"
                "broken 1\n"
                "\n"
                "search 1 3 2 1\n"
                "b@d 1 1\n",
                encoding="utf-8",
            )

            index, report = load_index(path)

        self.assertEqual(dict(index.lookup("search") or {}), {1: 3, 2: 1})
        self.assertEqual(dict(index.lookup("algorithm") or {}), {2: 1})
        self.assertIsNone(index.lookup("broken"))
        self.assertEqual(report.terms, 2)
        self.assertEqual(report.skipped_lines, [2, 5])
        self.assertFalse(report.ok)

    def test_repeated_word_merges_postings(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "dup.index"
            path.write_text("cat 1 1\ncat 2 5 1 4\n", encoding="utf-8")

            index, report = load_index(path)

        self.assertEqual(dict(index.lookup("cat") or {}), {1: 4, 2: 5})
        self.assertTrue(report.ok)

    def test_missing_file_yields_empty_index(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            index, report = load_index(Path(temp_dir) / "missing.index")

        self.assertEqual(len(index), 0)
        self.assertIsNotNone(report.read_error)

    def test_postings_are_read_only(self) -> None:
        index = InvertedIndex({"cat": {1: 1}})
        postings = index.lookup("cat")
        assert postings is not None
        with self.assertRaises(TypeError):
            postings[2] = 1  # type: ignore[index]

    def test_term_with_zero_counts_is_present(self) -> None:
        index = InvertedIndex({"cat": {1: 0}})
        self.assertIn("cat", index)
        self.assertEqual(dict(index.lookup("cat") or {}), {1: 0})
        self.assertIsNone(index.lookup("dog"))


class TestPageDirectory(unittest.TestCase):
    def _make_pages(self, root: Path) -> Path:
        pages = root / "pages"
        pages.mkdir()
        (pages / ".crawler").write_text("", encoding="utf-8")
        (pages / "1").write_text("http://example.com/index.html\n0\n<html></html>\n", encoding="utf-8")
        (pages / "2").write_text("", encoding="utf-8")
        return pages

    def test_resolve_returns_first_line(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            store = PageDirectory(self._make_pages(Path(temp_dir)))
            self.assertEqual(store.resolve(1), "http://example.com/index.html")

    def test_resolve_misses_return_none(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            store = PageDirectory(self._make_pages(Path(temp_dir)))
            self.assertIsNone(store.resolve(2))
            self.assertIsNone(store.resolve(3))
            self.assertIsNone(store.resolve(0))
            self.assertIsNone(store.resolve(-1))

    def test_rejects_directory_without_marker(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaisesRegex(PageDirectoryError, "is not a crawler directory"):
                PageDirectory(Path(temp_dir))


class TestCreateStorage(unittest.TestCase):
    def test_unreadable_index_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaisesRegex(IndexFileError, "cannot read index file"):
                check_index_file(Path(temp_dir) / "nope.index")

    def test_page_directory_checked_before_index(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(PageDirectoryError):
                create_storage(Path(temp_dir), Path(temp_dir) / "nope.index")

    def test_page_directory_checked_once(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / ".crawler").write_text("", encoding="utf-8")
            index_path = root / "site.index"
            index_path.write_text("cat 1 2\n", encoding="utf-8")

            with patch(
                "Querier.storage.pages.check_page_directory", wraps=check_page_directory
            ) as checker:
                create_storage(root, index_path)

        self.assertEqual(checker.call_count, 1)

    def test_missing_index_with_valid_pages(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / ".crawler").write_text("", encoding="utf-8")
            with self.assertRaisesRegex(IndexFileError, "cannot read index file"):
                create_storage(root, root / "nope.index")

    def test_skipped_index_lines_are_logged(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / ".crawler").write_text("", encoding="utf-8")
            index_path = root / "site.index"
            index_path.write_text("cat 1 2\nbroken 1\ndog 2 1\n", encoding="utf-8")

            with self.assertLogs("Querier", level="DEBUG") as captured:
                _, index = create_storage(root, index_path)

        self.assertIn("dog", index)
        self.assertTrue(
            any("Skipped index lines: [2]" in line for line in captured.output),
            captured.output,
        )

    def test_opens_both_collaborators(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / ".crawler").write_text("", encoding="utf-8")
            (root / "1").write_text("http://a/\n", encoding="utf-8")
            index_path = root / "site.index"
            index_path.write_text("cat 1 2\n", encoding="utf-8")

            pages, index = create_storage(root, index_path)

            self.assertEqual(pages.resolve(1), "http://a/")
            self.assertEqual(dict(index.lookup("cat") or {}), {1: 2})


if __name__ == "__main__":
    unittest.main()
