"""Configuration for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from dotenv_linter.domain.checklist import Checklist

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: dict[str, object] | None = None,
    ) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = config_dict
        self._tool_section = tool_section or {}
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Log problems with configuration values. Never raises."""
        for option in ("skip", "exclude"):
            raw = config.get(option)
            if raw is not None and not isinstance(raw, list):
                logger.warning(
                    "Configuration Warning: '%s' must be a list, got %s; ignoring it.",
                    option, type(raw).__name__,
                )

        known = set(Checklist.names())
        for name in self._string_list("skip"):
            if name not in known:
                logger.warning(
                    "Configuration Warning: unknown check '%s' in 'skip'. Known checks: %s",
                    name, ", ".join(Checklist.names()),
                )

    def _string_list(self, option: str) -> list[str]:
        raw = self._config.get(option, [])
        if isinstance(raw, list):
            return [x for x in raw if isinstance(x, str)]
        return []

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        return self._tool_section

    @property
    def skip_checks(self) -> list[str]:
        """Check names disabled for every scan."""
        return self._string_list("skip")

    @property
    def exclude_paths(self) -> list[str]:
        """Paths never scanned, even when a directory contains them."""
        return self._string_list("exclude")
