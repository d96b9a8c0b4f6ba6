"""Loading and normalization of Hound config files."""

import os
from pathlib import Path

import structlog
from pydantic import ValidationError

from hound.core import defaults
from hound.core.exceptions import ConfigDecodeError, ConfigReadError, PathResolutionError
from hound.core.models.config import Config
from hound.core.models.repository import Repository, URLPattern

logger = structlog.get_logger(__name__)


def normalize_repository(repo: Repository) -> None:
    """Populate missing repo values with default values, in place."""
    if repo.ms_between_poll == 0:
        repo.ms_between_poll = defaults.DEFAULT_MS_BETWEEN_POLL

    if not repo.vcs:
        repo.vcs = defaults.DEFAULT_VCS

    if repo.url_pattern is None:
        if defaults.AZURE_DEVOPS_MARKER in repo.url:
            repo.url_pattern = URLPattern(
                base_url=defaults.DEFAULT_BASE_URL_AZURE_DEVOPS,
                anchor=defaults.DEFAULT_ANCHOR_AZURE_DEVOPS,
            )
        else:
            repo.url_pattern = URLPattern(
                base_url=defaults.DEFAULT_BASE_URL,
                anchor=defaults.DEFAULT_ANCHOR,
            )
    else:
        # Keep whatever the author supplied, fill only the gaps
        if not repo.url_pattern.base_url:
            repo.url_pattern.base_url = defaults.DEFAULT_BASE_URL
        if not repo.url_pattern.anchor:
            repo.url_pattern.anchor = defaults.DEFAULT_ANCHOR


def apply_config_defaults(config: Config) -> None:
    """Populate missing top-level values with default values, in place."""
    if config.max_concurrent_indexers == 0:
        config.max_concurrent_indexers = defaults.DEFAULT_MAX_CONCURRENT_INDEXERS

    if not config.health_check_uri:
        config.health_check_uri = defaults.DEFAULT_HEALTH_CHECK_URI


def resolve_db_path(db_path: str, config_path: Path) -> str:
    """Resolve ``db_path`` against the directory holding the config file.

    Absolute paths are returned unchanged. Relative ones are
    canonicalized with ``Path.resolve``, so symlinks along the way are
    followed and the result names the real location, not just the
    joined and cleaned path.
    """
    if Path(db_path).is_absolute():
        return db_path
    try:
        return str((config_path.parent / db_path).resolve())
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(
            f"Unable to resolve dbpath: {db_path}",
            details={"dbpath": db_path, "config": str(config_path)},
        ) from exc


def load_config(filename: str | os.PathLike[str]) -> Config:
    """Load a Hound config file and fill in every default.

    Raises a ``ConfigurationError`` subclass on failure. No Config is
    returned in that case; callers should abort rather than retry.
    """
    path = Path(filename)
    try:
        with path.open("rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise ConfigReadError(
            f"Unable to read config file: {path}",
            details={"path": str(path), "reason": exc.strerror or str(exc)},
        ) from exc

    try:
        config = Config.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigDecodeError(
            f"Invalid config file: {path}",
            details={"path": str(path), "errors": exc.error_count()},
        ) from exc

    if not config.title:
        config.title = defaults.DEFAULT_TITLE

    config.db_path = resolve_db_path(config.db_path, path)

    for name, repo in config.repos.items():
        normalize_repository(repo)
        logger.debug("Repository configured", repo=name, vcs=repo.vcs)

    apply_config_defaults(config)

    logger.info(
        "Config loaded",
        path=str(path),
        repos=len(config.repos),
        dbpath=config.db_path,
    )
    return config
