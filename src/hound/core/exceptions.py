"""Exception hierarchy for Hound."""

from typing import Any


class HoundError(Exception):
    """Base exception for all Hound errors.

    Carries an optional ``details`` mapping with the context a caller
    needs to log the failure before aborting.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ConfigurationError(HoundError):
    """Base exception for configuration errors."""

    pass


class ConfigReadError(ConfigurationError):
    """The config file could not be opened or read."""

    pass


class ConfigDecodeError(ConfigurationError):
    """The config file is not valid JSON or has mistyped fields."""

    pass


class PathResolutionError(ConfigurationError):
    """A relative path from the config could not be made absolute."""

    pass


class ConfigEncodeError(ConfigurationError):
    """The repository map could not be serialized."""

    pass
