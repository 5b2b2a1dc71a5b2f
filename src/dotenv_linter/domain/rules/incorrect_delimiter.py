"""Incorrect delimiter check (keys use `_` between words)."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class IncorrectDelimiterChecker(Check):
    name = "IncorrectDelimiter"
    template = "The {} key has incorrect delimiter"

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None:
            return None
        if all(char.isalnum() or char == "_" for char in key):
            return None
        return LintWarning(line, self.message(key))
