"""Load [tool.dotenv-linter] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

logger = logging.getLogger(__name__)

TOOL_NAME = "dotenv-linter"


class ConfigFileLoader:
    """
    Loads config from pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> tuple[dict[str, object], dict[str, object]]:
        """Load [tool.dotenv-linter] and [tool] from the nearest pyproject.toml. Returns (config_dict, tool_section)."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Skipping unreadable %s: %s", config_file, exc)
                continue
            tool_section = ConfigFileLoader._table(data.get("tool"), "[tool]", config_file)
            config_dict = ConfigFileLoader._table(
                tool_section.get(TOOL_NAME), f"[tool.{TOOL_NAME}]", config_file)
            logger.debug("Loaded configuration from %s", config_file)
            return (config_dict, tool_section)
        return (empty, empty)

    @staticmethod
    def _table(raw: object, label: str, config_file: Path) -> dict[str, object]:
        """Return raw when it is a TOML table, else {} with a warning."""
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning(
                "Configuration Warning: %s in %s must be a table, got %s; ignoring it.",
                label, config_file, type(raw).__name__,
            )
            return {}
        return raw
