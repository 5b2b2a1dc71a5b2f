"""Key without value check."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class KeyWithoutValueChecker(Check):
    """Flags lines that have no unescaped `=`, i.e. no key at all."""

    name = "KeyWithoutValue"
    template = "The {} key should be with a value or have an equal sign"

    def run(self, line: LineEntry) -> LintWarning | None:
        if line.get_key() is not None:
            return None
        return LintWarning(line, self.message(line.raw_string.strip()))
