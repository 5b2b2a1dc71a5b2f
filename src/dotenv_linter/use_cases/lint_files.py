"""Use Case: Lint Files - discover env files, read them and run the checks."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from dotenv_linter.domain.entities import LineEntry, LintResult
from dotenv_linter.domain.exceptions import FileReadError
from dotenv_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from dotenv_linter.use_cases.run_checks import CheckRunner

if TYPE_CHECKING:
    from dotenv_linter.domain.config import ConfigurationLoader


class LintFilesUseCase:
    """Orchestrate one scan and return its result."""

    def __init__(
        self,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: "ConfigurationLoader",
    ) -> None:
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader

    def execute(
        self,
        paths: Iterable[str],
        skip_checks: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> LintResult:
        """
        Scan the given paths.

        Skip and exclude lists from the command line are added to the ones in
        configuration. A file that cannot be read is reported and left out;
        the scan always continues.

        Args:
            paths: Files or directories to scan.
            skip_checks: Check names to disable.
            exclude: Paths to leave out.

        Returns:
            LintResult with the scanned files and all warnings in order.
        """
        skipped = [*self.config_loader.skip_checks, *skip_checks]
        excluded = [*self.config_loader.exclude_paths, *exclude]

        files = self.filesystem.find_env_files(paths, excluded)
        scanned: list[str] = []
        lines: list[LineEntry] = []
        for path in files:
            try:
                file_lines = self.filesystem.read_lines(path)
            except FileReadError as exc:
                self.telemetry.error(str(exc))
                continue
            scanned.append(path)
            lines.extend(file_lines)

        self.telemetry.step(f"Checking {len(scanned)} file(s)...")
        warnings = CheckRunner.run(lines, skipped)
        return LintResult(files=scanned, warnings=warnings)
