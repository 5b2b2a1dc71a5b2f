"""Leading character check."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class LeadingCharacterChecker(Check):
    """A line must start with a letter or an underscore."""

    name = "LeadingCharacter"
    template = "Invalid leading character detected"

    def run(self, line: LineEntry) -> LintWarning | None:
        first = line.raw_string[:1]
        if first and (first.isalpha() or first == "_"):
            return None
        return LintWarning(line, self.message())
