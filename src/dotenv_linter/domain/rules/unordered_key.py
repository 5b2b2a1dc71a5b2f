"""Unordered key check: keys should be in alphabetical order."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class UnorderedKeyChecker(Check):
    """
    Stateful: remembers the previous key of each file.

    Each key is compared with the key immediately before it, not with the
    smallest key seen so far, so only adjacent disorder is reported.
    """

    name = "UnorderedKey"
    template = "The {} key should go before the {} key"

    def __init__(self) -> None:
        self._previous: dict[str, str] = {}

    def run(self, line: LineEntry) -> LintWarning | None:
        key = line.get_key()
        if key is None:
            return None
        previous = self._previous.get(line.file_path)
        self._previous[line.file_path] = key
        if previous is not None and key < previous:
            return LintWarning(line, self.message(key, previous))
        return None
