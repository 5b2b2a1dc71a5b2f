"""Ports the use cases depend on. Implemented in infrastructure/interface."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dotenv_linter.domain.entities import LineEntry


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations: env file discovery and reading."""

    def find_env_files(self, paths: Iterable[str], exclude: Iterable[str] = ()) -> list[str]:
        """Files to scan: explicit files plus `.env*` entries of directories."""
        ...

    def read_lines(self, path: str) -> list["LineEntry"]:
        """Split a file into line records numbered from 1. Raises FileReadError."""
        ...
