"""Unit tests for DuplicatedKeyChecker."""

import unittest

from dotenv_linter.domain.entities import LintWarning
from dotenv_linter.domain.rules.duplicated_key import DuplicatedKeyChecker
from tests.unit.line_test_utils import make_line, make_lines


class TestDuplicatedKeyChecker(unittest.TestCase):

    def setUp(self) -> None:
        self.checker = DuplicatedKeyChecker()

    def _run_all(self, lines):
        return [self.checker.run(line) for line in lines]

    def test_unique_keys_pass(self) -> None:
        self.assertEqual(self._run_all(make_lines("FOO=BAR", "BAR=FOO")), [None, None])

    def test_second_occurrence_warns(self) -> None:
        lines = make_lines("FOO=1", "FOO=2")
        self.assertEqual(
            self._run_all(lines),
            [None, LintWarning(lines[1], "DuplicatedKey: The FOO key is duplicated")],
        )

    def test_every_repeat_warns(self) -> None:
        results = self._run_all(make_lines("FOO=1", "FOO=2", "FOO=3"))
        self.assertIsNone(results[0])
        self.assertIsNotNone(results[1])
        self.assertIsNotNone(results[2])

    def test_comparison_is_case_sensitive(self) -> None:
        self.assertEqual(self._run_all(make_lines("FOO=1", "foo=2")), [None, None])

    def test_line_without_key_is_ignored(self) -> None:
        self.assertEqual(self._run_all(make_lines("FOO", "FOO")), [None, None])

    def test_state_is_partitioned_by_file(self) -> None:
        lines = [
            *make_lines("FOO=1", "FOO=2", file_path=".env"),
            make_line("FOO=3", file_path=".env.test"),
        ]
        results = self._run_all(lines)
        self.assertIsNone(results[0])
        self.assertEqual(
            results[1], LintWarning(lines[1], "DuplicatedKey: The FOO key is duplicated"))
        self.assertIsNone(results[2])

    def test_name(self) -> None:
        self.assertEqual(self.checker.name, "DuplicatedKey")
