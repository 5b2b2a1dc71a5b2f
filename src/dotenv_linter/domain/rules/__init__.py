"""Domain models for checks: the Check contract every rule implements."""

__all__ = [
    "Check",
]

from typing import ClassVar, Protocol

from dotenv_linter.domain.entities import LineEntry, LintWarning


class Check(Protocol):
    """
    A named rule that inspects one line at a time.

    Stateless checks look at the line alone. Stateful checks may remember
    earlier lines, partitioned by file path. Violations are returned, never
    raised: a check that cannot find what it needs simply abstains.
    """

    name: ClassVar[str]
    template: ClassVar[str]

    def run(self, line: LineEntry) -> LintWarning | None:
        """Return a warning if the line violates the rule, else None."""
        ...

    def message(self, *args: str) -> str:
        """Build `<name>: <description>` from the template."""
        return f"{self.name}: {self.template.format(*args)}"
