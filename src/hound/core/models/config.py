"""Top-level Hound configuration model."""

from typing import Any

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    field_validator,
)
from pydantic_core import PydanticSerializationError

from hound.core.exceptions import ConfigEncodeError
from hound.core.models.repository import Repository

logger = structlog.get_logger(__name__)

_REPOS_ADAPTER = TypeAdapter(dict[str, Repository])


class Config(BaseModel):
    """Configuration for a Hound instance.

    Built by ``hound.core.loader.load_config`` and treated as read-only
    afterwards.
    """

    model_config = ConfigDict(populate_by_name=True)

    db_path: StrictStr = Field(default="", alias="dbpath")
    title: StrictStr = ""
    repos: dict[str, Repository] = Field(default_factory=dict)
    max_concurrent_indexers: StrictInt = Field(default=0, alias="max-concurrent-indexers")
    health_check_uri: StrictStr = Field(default="", alias="health-check-uri")

    @field_validator("db_path", "title", "health_check_uri", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("max_concurrent_indexers", mode="before")
    @classmethod
    def null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("repos", mode="before")
    @classmethod
    def null_as_no_repos(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_json_string(self) -> str:
        """Serialize the repository map for external consumers.

        Every ``vcs-config`` renders as ``{}``, so the result is safe to
        hand to untrusted viewers.
        """
        repos = {name: self.repos[name] for name in sorted(self.repos)}
        try:
            return _REPOS_ADAPTER.dump_json(repos, by_alias=True).decode("utf-8")
        except PydanticSerializationError as exc:
            logger.error("Failed to serialize repos", error=str(exc))
            raise ConfigEncodeError(
                "Unable to serialize repository map",
                details={"repos": len(repos)},
            ) from exc
