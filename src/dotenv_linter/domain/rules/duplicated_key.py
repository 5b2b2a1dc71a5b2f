"""Duplicated key check: a key may appear only once per file."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class DuplicatedKeyChecker(Check):
    """
    Stateful: remembers every key seen in each file.

    Keys are compared exactly (case-sensitive, no normalization).
    """

    name = "DuplicatedKey"
    template = "The {} key is duplicated"

    def __init__(self) -> None:
        self._keys: dict[str, set[str]] = {}

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None:
            return None
        seen = self._keys.setdefault(line.file_path, set())
        if key in seen:
            return LintWarning(line, self.message(key))
        seen.add(key)
        return None
