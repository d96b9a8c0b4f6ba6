"""Git hosting integration for Hound."""

from hound.git.url_resolver import URLResolver

__all__ = ["URLResolver"]
