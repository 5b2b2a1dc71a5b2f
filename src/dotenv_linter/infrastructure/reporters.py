"""Terminal reporter implementation."""

from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from dotenv_linter.domain.entities import LintResult
    from dotenv_linter.domain.protocols import TelemetryPort


class TerminalWarningReporter:
    """Prints `path:line Check: description` per warning. Implements WarningReporter."""

    def __init__(self, telemetry: "TelemetryPort") -> None:
        self._telemetry = telemetry

    def report(self, result: "LintResult") -> None:
        for warning in result.warnings:
            typer.echo(str(warning))
        if not result.has_warnings():
            self._telemetry.step("No problems found")
            return
        total = len(result.warnings)
        breakdown = ", ".join(
            f"{name}: {count}" for name, count in result.count_by_check().items())
        self._telemetry.step(
            f"Found {total} problem{'s' if total != 1 else ''} ({breakdown})")

    def report_checks(self, names: list[str]) -> None:
        for name in names:
            typer.echo(name)
