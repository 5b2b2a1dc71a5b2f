"""Unit tests for LineEntry, LintWarning and LintResult."""

import unittest

from dotenv_linter.domain.entities import LineEntry, LintResult, LintWarning


def _line(raw: str) -> LineEntry:
    return LineEntry(number=1, file_path=".env", raw_string=raw)


class TestLineEntry(unittest.TestCase):

    def test_empty_and_comment_lines(self) -> None:
        for raw in ("", "   ", "# comment", "   # indented comment"):
            with self.subTest(raw=raw):
                self.assertTrue(_line(raw).is_empty_or_comment())

    def test_regular_line_is_not_comment(self) -> None:
        self.assertFalse(_line("FOO=BAR # trailing").is_empty_or_comment())

    def test_get_key_strips_whitespace(self) -> None:
        self.assertEqual(_line("  FOO =BAR").get_key(), "FOO")

    def test_get_key_uses_first_delimiter(self) -> None:
        line = _line("FOO=BAR=BAZ")
        self.assertEqual(line.get_key(), "FOO")
        self.assertEqual(line.get_value(), "BAR=BAZ")

    def test_get_key_without_delimiter_is_none(self) -> None:
        line = _line("FOO")
        self.assertIsNone(line.get_key())
        self.assertIsNone(line.get_value())

    def test_escaped_delimiter_is_part_of_key(self) -> None:
        line = _line(r"FOO\=BAR=BAZ")
        self.assertEqual(line.get_key(), r"FOO\=BAR")
        self.assertEqual(line.get_value(), "BAZ")

    def test_empty_value(self) -> None:
        self.assertEqual(_line("FOO=").get_value(), "")

    def test_line_entry_is_immutable(self) -> None:
        line = _line("FOO=BAR")
        with self.assertRaises(AttributeError):
            line.number = 2  # type: ignore[misc]


class TestLintWarning(unittest.TestCase):

    def test_str_renders_location_and_message(self) -> None:
        line = LineEntry(number=3, file_path="app/.env", raw_string="foo=1")
        warning = LintWarning(line, "LowercaseKey: The foo key should be in uppercase")
        self.assertEqual(
            str(warning), "app/.env:3 LowercaseKey: The foo key should be in uppercase")
        self.assertEqual(warning.check_name, "LowercaseKey")


class TestLintResult(unittest.TestCase):

    def test_empty_result_has_no_warnings(self) -> None:
        self.assertFalse(LintResult().has_warnings())

    def test_count_by_check(self) -> None:
        line = _line("x")
        result = LintResult(
            files=[".env"],
            warnings=[
                LintWarning(line, "KeyWithoutValue: a"),
                LintWarning(line, "LeadingCharacter: b"),
                LintWarning(line, "KeyWithoutValue: c"),
            ],
        )
        self.assertTrue(result.has_warnings())
        self.assertEqual(
            result.count_by_check(), {"KeyWithoutValue": 2, "LeadingCharacter": 1})
