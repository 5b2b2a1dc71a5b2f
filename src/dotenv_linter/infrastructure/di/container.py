from typing import TYPE_CHECKING, Any, cast

from dotenv_linter.domain.config import ConfigurationLoader
from dotenv_linter.infrastructure.config_file_loader import ConfigFileLoader
from dotenv_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from dotenv_linter.infrastructure.reporters import TerminalWarningReporter
from dotenv_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from dotenv_linter.domain.protocols import FileSystemProtocol, TelemetryPort
    from dotenv_linter.interface.reporters import WarningReporter


class DotenvLinterContainer:
    """Dependency Injection Container for dotenv-linter."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry(
            "DOTENV-LINTER", "cyan", "Scanning .env files")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("FileSystemGateway", FileSystemGateway(telemetry))
        self.register_singleton("WarningReporter", TerminalWarningReporter(telemetry))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loaded from pyproject.toml."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self) -> "WarningReporter":
        """Return the warning reporter."""
        return cast("WarningReporter", self.get("WarningReporter"))
