"""Domain models for Hound."""

from hound.core.models.config import Config
from hound.core.models.repository import Repository, URLPattern
from hound.core.models.secret import SecretMessage

__all__ = [
    "Config",
    "Repository",
    "URLPattern",
    "SecretMessage",
]
