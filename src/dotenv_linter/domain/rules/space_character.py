"""Space character check."""

from dotenv_linter.domain.entities import DELIMITER, LineEntry, LintWarning
from dotenv_linter.domain.rules import Check


class SpaceCharacterChecker(Check):
    """Flags whitespace directly around the `=` of a `KEY=value` line."""

    name = "SpaceCharacter"
    template = "The line has spaces around equal sign"

    def run(self, line: LineEntry) -> LintWarning | None:
        parts = line.raw_string.split(DELIMITER)
        if len(parts) != 2:
            return None
        key, value = parts
        if key[-1:].isspace() or value[:1].isspace():
            return LintWarning(line, self.message())
        return None
