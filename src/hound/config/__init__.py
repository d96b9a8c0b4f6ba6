"""Settings and logging for the hound tooling."""

from hound.config.logging import configure_logging
from hound.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
