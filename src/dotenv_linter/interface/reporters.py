"""Protocol for warning reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dotenv_linter.domain.entities import LintResult


class WarningReporter(Protocol):
    """Protocol for reporting scan results to the user."""

    def report(self, result: "LintResult") -> None:
        """Report every warning of a scan, then a summary."""
        ...

    def report_checks(self, names: list[str]) -> None:
        """List the available check names."""
        ...
