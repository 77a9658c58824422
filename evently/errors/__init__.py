"""Error types raised by evently."""

from evently.errors.evently_errors import ConfigurationError
from evently.errors.evently_errors import EventlyError
from evently.errors.evently_errors import InvalidArgumentError

__all__ = [
    "ConfigurationError",
    "EventlyError",
    "InvalidArgumentError",
]
