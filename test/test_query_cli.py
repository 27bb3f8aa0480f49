"""End-to-end tests for the `querier query` command."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
import warnings
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from Querier.cli import cli
from Querier.renderers.console import SEPARATOR
from Querier.utils.log import log

INDEX_TEXT = (
    "dartmouth 1 2 2 1\n"
    "college 1 3\n"
    "tse 3 1\n"
    "search 2 1\n"
)


class TestQueryCommand(unittest.TestCase):
    def setUp(self) -> None:
        self._temp = tempfile.TemporaryDirectory()
        root = Path(self._temp.name)
        self.pages = root / "letters"
        self.pages.mkdir()
        (self.pages / ".crawler").write_text("", encoding="utf-8")
        (self.pages / "1").write_text("http://cs50tse.cs.dartmouth.edu/tse/letters/index.html\n0\n", encoding="utf-8")
        (self.pages / "2").write_text("http://cs50tse.cs.dartmouth.edu/tse/letters/A.html\n1\n", encoding="utf-8")
        self.index = root / "letters.index"
        self.index.write_text(INDEX_TEXT, encoding="utf-8")
        self.runner = CliRunner()
        self._env = patch.dict(os.environ, {"QUERIER_LOG_LEVEL": "INFO"})
        self._env.start()

    def tearDown(self) -> None:
        self._env.stop()
        log.handlers.clear()
        self._temp.cleanup()

    def _invoke(self, text: str, *args: str):
        return self.runner.invoke(
            cli,
            [*args, "query", str(self.pages), str(self.index)],
            input=text,
            catch_exceptions=False,
        )

    def test_ranked_and_no_match_blocks(self) -> None:
        result = self._invoke("Dartmouth OR college\nzzz\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(
            "Query: dartmouth or college\n"
            "Matches 2 documents (ranked):\n"
            "score   5  doc   1: http://cs50tse.cs.dartmouth.edu/tse/letters/index.html\n"
            "score   1  doc   2: http://cs50tse.cs.dartmouth.edu/tse/letters/A.html\n"
            f"{SEPARATOR}\n",
            result.output,
        )
        self.assertIn(f"Query: zzz\nNo documents match.\n{SEPARATOR}\n", result.output)

    def test_missing_page_file_uses_placeholder(self) -> None:
        result = self._invoke("tse\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("score   1  doc   3: (no-url)\n", result.output)

    def test_syntax_errors_do_not_stop_the_loop(self) -> None:
        result = self._invoke("c@t\nand dog\ncat and\ndog and or cat\ncollege\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Error: bad character '@' in query", result.output)
        self.assertIn("Error: 'and' cannot be first", result.output)
        self.assertIn("Error: 'and' cannot be last", result.output)
        self.assertIn("Error: 'and' and 'or' cannot be adjacent", result.output)
        self.assertIn("Query: college\nMatches 1 documents (ranked):\n", result.output)
        self.assertEqual(result.output.count("Query: "), 1)
        error_lines = [line for line in result.output.splitlines() if "Error: " in line]
        self.assertEqual(len(error_lines), 4, error_lines)

    def test_blank_line_is_skipped_and_no_prompt_without_tty(self) -> None:
        result = self._invoke("\n   \n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("Query:", result.output)
        self.assertNotIn("Query?", result.output)

    def test_reading_stdin_emits_no_deprecation_warning(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = self._invoke("college\n")

        self.assertEqual(result.exit_code, 0, result.output)
        messages = [str(item.message) for item in caught if issubclass(item.category, DeprecationWarning)]
        self.assertFalse([m for m in messages if "Click 9.0" in m], messages)

    def test_max_results_from_config(self) -> None:
        config_path = Path(self._temp.name) / "limit.yml"
        config_path.write_text("query:\n  max_results: 1\n", encoding="utf-8")

        result = self._invoke("dartmouth\n", "--config", str(config_path))

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Matches 2 documents (ranked):\nscore   2  doc   1:", result.output)
        self.assertNotIn("doc   2:", result.output)

    def test_not_a_crawler_directory(self) -> None:
        (self.pages / ".crawler").unlink()

        result = self._invoke("dartmouth\n")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("is not a crawler directory", result.output)
        self.assertNotIn("Query:", result.output)

    def test_unreadable_index_file(self) -> None:
        self.index.unlink()

        result = self._invoke("dartmouth\n")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("cannot read index file", result.output)

    def test_malformed_index_lines_are_reported_once(self) -> None:
        self.index.write_text(INDEX_TEXT + "broken 1\nb@d 1 1\n", encoding="utf-8")

        result = self._invoke("college\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.count("errors encountered while loading index file"), 1)
        self.assertIn("score   3  doc   1:", result.output)

    def test_wrong_argument_count(self) -> None:
        result = self.runner.invoke(cli, ["query", str(self.pages)])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Usage:", result.output)

    def test_out_of_memory_exits_with_status_two(self) -> None:
        with patch("Querier.services.query.rank_scores", side_effect=MemoryError):
            result = self._invoke("dartmouth\n")

        self.assertEqual(result.exit_code, 2)
        self.assertNotIn("Matches", result.output)

    def test_out_of_memory_while_loading_index_exits_with_status_two(self) -> None:
        with patch("Querier.storage.index.build_index", side_effect=MemoryError):
            result = self._invoke("dartmouth\n")

        self.assertEqual(result.exit_code, 2)
        self.assertIn("Out of memory while loading index file", result.output)
        self.assertNotIn("Query:", result.output)


if __name__ == "__main__":
    unittest.main()
