"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import logging
from collections.abc import Iterable
from pathlib import Path

from dotenv_linter.domain.entities import LineEntry
from dotenv_linter.domain.exceptions import FileReadError
from dotenv_linter.domain.protocols import FileSystemProtocol, TelemetryPort

logger = logging.getLogger(__name__)

ENV_FILE_PREFIX = ".env"


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def __init__(self, telemetry: TelemetryPort | None = None, encoding: str = "utf-8") -> None:
        self._telemetry = telemetry
        self._encoding = encoding

    def find_env_files(self, paths: Iterable[str], exclude: Iterable[str] = ()) -> list[str]:
        """
        Files to scan, in input order.

        Explicit files are taken as they are. Directories contribute their direct
        children whose name starts with `.env`, sorted by name. Excluded paths are
        compared after resolution; excluding a directory excludes its files.
        A file reached twice is scanned once.
        """
        excluded = {Path(p).resolve() for p in exclude}
        seen: set[Path] = set()
        found: list[str] = []
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                candidates = sorted(
                    child for child in path.iterdir()
                    if child.is_file() and child.name.startswith(ENV_FILE_PREFIX)
                )
            elif path.is_file():
                candidates = [path]
            else:
                self._report_missing(raw)
                continue
            for candidate in candidates:
                resolved = candidate.resolve()
                if resolved in seen or self._is_excluded(resolved, excluded):
                    continue
                seen.add(resolved)
                found.append(str(candidate))
        logger.debug("Found %d env file(s)", len(found))
        return found

    def read_lines(self, path: str) -> list[LineEntry]:
        """Split a file into line records numbered from 1."""
        try:
            content = Path(path).read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(path, str(exc)) from exc
        return [
            LineEntry(number=number, file_path=path, raw_string=raw)
            for number, raw in enumerate(content.splitlines(), start=1)
        ]

    @staticmethod
    def _is_excluded(path: Path, excluded: set[Path]) -> bool:
        """An excluded directory excludes everything beneath it."""
        return path in excluded or any(parent in excluded for parent in path.parents)

    def _report_missing(self, path: str) -> None:
        message = f"Path not found: {path}"
        if self._telemetry is not None:
            self._telemetry.warning(message)
        else:
            logger.warning(message)
