"""Quote character check."""

from dotenv_linter.domain.entities import LineEntry, LintWarning
from dotenv_linter.domain.rules import Check

QUOTES = ('"', "'")


class QuoteCharacterChecker(Check):
    """Values should not carry quote characters."""

    name = "QuoteCharacter"
    template = "The value is wrapped in quotes"

    def run(self, line: LineEntry) -> LintWarning | None:
        value = line.get_value()
        if value is None or not any(quote in value for quote in QUOTES):
            return None
        return LintWarning(line, self.message())
