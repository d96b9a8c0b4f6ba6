"""Core domain models, defaults and config loading for Hound."""

from hound.core.exceptions import (
    ConfigDecodeError,
    ConfigEncodeError,
    ConfigReadError,
    ConfigurationError,
    HoundError,
    PathResolutionError,
)
from hound.core.loader import load_config, normalize_repository
from hound.core.models import Config, Repository, SecretMessage, URLPattern

__all__ = [
    # Models
    "Config",
    "Repository",
    "URLPattern",
    "SecretMessage",
    # Loading
    "load_config",
    "normalize_repository",
    # Exceptions
    "HoundError",
    "ConfigurationError",
    "ConfigReadError",
    "ConfigDecodeError",
    "PathResolutionError",
    "ConfigEncodeError",
]
