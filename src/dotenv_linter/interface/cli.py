"""CLI entry points for dotenv-linter - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from dotenv_linter import __version__
from dotenv_linter.domain.checklist import Checklist
from dotenv_linter.domain.config import ConfigurationLoader
from dotenv_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from dotenv_linter.interface.reporters import WarningReporter
from dotenv_linter.use_cases.lint_files import LintFilesUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    reporter: WarningReporter


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="dotenv-linter",
            help="Lightning-fast linter for .env files.",
            add_completion=False,
        )

        def _version_callback(value: bool) -> None:
            if value:
                typer.echo(f"dotenv-linter {__version__}")
                raise typer.Exit()

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to check (default: .)"),  # noqa: B008
            skip: list[str] | None = typer.Option(
                None, "--skip", "-s", help="Skip a check by name. Repeatable."),  # noqa: B008
            exclude: list[Path] | None = typer.Option(
                None, "--exclude", "-e", help="Exclude a file from checking. Repeatable."),  # noqa: B008
            show_checks: bool = typer.Option(
                False, "--show-checks", help="Print the available checks and exit"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Enable debug logging"),
            version: bool = typer.Option(
                False, "--version", callback=_version_callback, is_eager=True,
                help="Print the version and exit"),
        ) -> None:
            """Check .env files. Exits with status 1 when any problem is found."""
            if verbose:
                logging.basicConfig(
                    level=logging.DEBUG,
                    format="%(levelname)s %(name)s: %(message)s",
                )
            if show_checks:
                deps.reporter.report_checks(Checklist.names())
                raise typer.Exit(code=0)

            deps.telemetry.handshake()
            targets = [str(p) for p in paths] if paths else ["."]
            use_case = LintFilesUseCase(
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
            )
            result = use_case.execute(
                targets,
                skip_checks=skip or [],
                exclude=[str(p) for p in exclude or []],
            )
            deps.reporter.report(result)
            raise typer.Exit(code=1 if result.has_warnings() else 0)

        return app
