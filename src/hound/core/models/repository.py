"""Repository configuration models."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)

from hound.core.defaults import DEFAULT_POLL_ENABLED, DEFAULT_PUSH_ENABLED
from hound.core.models.secret import SecretMessage


class URLPattern(BaseModel):
    """Templates for linking to a line of a file in a repo's web UI.

    ``base_url`` may reference ``{url}``, ``{path}`` and ``{anchor}``;
    ``anchor`` may reference ``{line}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    base_url: StrictStr = Field(default="", alias="base-url")
    anchor: StrictStr = ""

    @field_validator("base_url", "anchor", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


def _option_to_bool(value: bool | None, default: bool) -> bool:
    """Interpret a tri-state flag, falling back to ``default`` when unset."""
    if value is None:
        return default
    return value


class Repository(BaseModel):
    """A source repository managed by Hound.

    Poll interval, VCS kind and URL pattern are filled in by
    ``hound.core.loader.normalize_repository``. The update flags stay
    tri-state; use :meth:`poll_updates_enabled` and
    :meth:`push_updates_enabled` for their effective values.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: StrictStr
    ms_between_poll: StrictInt = Field(default=0, alias="ms-between-poll")
    vcs: StrictStr = ""
    vcs_config_message: SecretMessage | None = Field(default=None, alias="vcs-config")
    url_pattern: URLPattern | None = Field(default=None, alias="url-pattern")
    exclude_dot_files: StrictBool = Field(default=False, alias="exclude-dot-files")
    enable_poll_updates: StrictBool | None = Field(default=None, alias="enable-poll-updates")
    enable_push_updates: StrictBool | None = Field(default=None, alias="enable-push-updates")

    # JSON null leaves a scalar at its zero value, ready for defaulting
    @field_validator("url", "vcs", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("ms_between_poll", mode="before")
    @classmethod
    def null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("exclude_dot_files", mode="before")
    @classmethod
    def null_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    def poll_updates_enabled(self) -> bool:
        """Are polling based updates enabled on this repo?"""
        return _option_to_bool(self.enable_poll_updates, DEFAULT_POLL_ENABLED)

    def push_updates_enabled(self) -> bool:
        """Are push based updates enabled on this repo?"""
        return _option_to_bool(self.enable_push_updates, DEFAULT_PUSH_ENABLED)

    def vcs_config(self) -> bytes | None:
        """Get the JSON encoded vcs-config for this repo.

        Returns None if the repo doesn't declare a vcs-config.
        """
        if self.vcs_config_message is None:
            return None
        return self.vcs_config_message.get_secret_value()
