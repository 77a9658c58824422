"""Configuration for evently emitters.

Emitters read the process-wide configuration at dispatch time, so changes
made through :mod:`evently.config.config_manager` apply to existing emitters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from evently.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class EventlyConfig:
    """Settings shared by all emitters in the process.

    Instances are immutable; use :func:`update_config` or
    :func:`config_context` to derive changed copies.
    """

    # Log every dispatch at trace_level
    trace_dispatch: bool = False
    trace_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if not isinstance(self.trace_dispatch, bool):
            raise ConfigurationError(
                "trace_dispatch must be a boolean",
                config_key="trace_dispatch",
                details={"value": self.trace_dispatch},
            )

        if self.trace_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.trace_level!r}",
                config_key="trace_level",
                details={"allowed": list(LOG_LEVELS)},
            )


# Default configuration instance
DEFAULT_CONFIG = EventlyConfig()
