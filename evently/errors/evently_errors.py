"""Exception hierarchy for evently.

Listener exceptions are never wrapped: they reach the caller of ``emit``
unchanged. The classes here cover misuse of the emitter API and invalid
configuration.
"""

from __future__ import annotations

from typing import Any


class EventlyError(Exception):
    """Base exception for all evently errors.

    All evently-specific exceptions inherit from this class so callers can
    catch them in one place.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class InvalidArgumentError(EventlyError, ValueError):
    """Raised when an emitter method receives an unusable argument."""

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if argument:
            details["argument"] = argument
        super().__init__(message, error_code="InvalidArgument", details=details, **kwargs)
        self.argument = argument


class ConfigurationError(EventlyError):
    """Raised when there's a configuration problem."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key
