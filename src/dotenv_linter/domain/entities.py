"""Domain entities: line records, warnings and scan results."""

from collections import Counter
from dataclasses import dataclass, field

DELIMITER = "="
ESCAPE = "\\"
COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class LineEntry:
    """One physical line of a scanned file."""

    number: int
    file_path: str
    raw_string: str

    def is_empty_or_comment(self) -> bool:
        trimmed = self.raw_string.strip()
        return not trimmed or trimmed.startswith(COMMENT_PREFIX)

    def _delimiter_index(self) -> int:
        """Index of the first `=` not preceded by a backslash, or -1."""
        escaped = False
        for index, char in enumerate(self.raw_string):
            if escaped:
                escaped = False
            elif char == ESCAPE:
                escaped = True
            elif char == DELIMITER:
                return index
        return -1

    def get_key(self) -> str | None:
        """Key before the first unescaped delimiter, stripped. None without a delimiter."""
        index = self._delimiter_index()
        if index < 0:
            return None
        return self.raw_string[:index].strip()

    def get_value(self) -> str | None:
        """Value after the first unescaped delimiter, stripped. None without a delimiter."""
        index = self._delimiter_index()
        if index < 0:
            return None
        return self.raw_string[index + 1:].strip()


@dataclass(frozen=True)
class LintWarning:
    """A warning raised by a check: the offending line plus `<CheckName>: <description>`."""

    line: LineEntry
    message: str

    @property
    def check_name(self) -> str:
        return self.message.split(":", 1)[0]

    def __str__(self) -> str:
        return f"{self.line.file_path}:{self.line.number} {self.message}"


@dataclass(frozen=True)
class LintResult:
    """Outcome of one scan: files visited and warnings in report order."""

    files: list[str] = field(default_factory=list)
    warnings: list[LintWarning] = field(default_factory=list)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def count_by_check(self) -> dict[str, int]:
        """Warning totals per check name, in first-seen order."""
        return dict(Counter(w.check_name for w in self.warnings))
