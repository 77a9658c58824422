"""Configuration management for evently."""

from evently.config.config_manager import ConfigContext
from evently.config.config_manager import config_context
from evently.config.config_manager import get_config
from evently.config.config_manager import reset_config
from evently.config.config_manager import set_config
from evently.config.config_manager import update_config
from evently.config.evently_config import DEFAULT_CONFIG
from evently.config.evently_config import EventlyConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigContext",
    "EventlyConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
