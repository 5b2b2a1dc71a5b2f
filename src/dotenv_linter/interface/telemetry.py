"""Project telemetry: user-facing status lines on stderr."""

import typer

from dotenv_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Status output tagged with the project name. Warnings go to stdout, not here."""

    def __init__(self, project_name: str, color: str = typer.colors.CYAN, welcome: str = "") -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome

    def _tag(self) -> str:
        return typer.style(f"[{self.project_name}]", fg=self.color, bold=True)

    def handshake(self) -> None:
        if self.welcome:
            self.step(self.welcome)

    def step(self, message: str) -> None:
        if not message:
            return
        typer.echo(f"{self._tag()} {message}", err=True)

    def warning(self, message: str) -> None:
        typer.echo(f"{self._tag()} " + typer.style(message, fg=typer.colors.YELLOW), err=True)

    def error(self, message: str) -> None:
        typer.echo(f"{self._tag()} " + typer.style(message, fg=typer.colors.RED), err=True)
