"""Lowercase key check."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class LowercaseKeyChecker(Check):
    name = "LowercaseKey"
    template = "The {} key should be in uppercase"

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None or key.upper() == key:
            return None
        return LintWarning(line, self.message(key))
