"""CLI for inspecting Hound config files."""

import sys

import click
import structlog

from hound.config.logging import configure_logging
from hound.config.settings import get_settings
from hound.core.exceptions import HoundError
from hound.core.loader import load_config
from hound.core.models.config import Config
from hound.git.url_resolver import URLResolver

logger = structlog.get_logger(__name__)

CONFIG_ARGUMENT = click.argument("config_path", required=False)


def _load(config_path: str | None) -> Config:
    """Load a config, exiting with status 1 on failure."""
    path = config_path or get_settings().config_path
    try:
        return load_config(path)
    except HoundError as exc:
        logger.debug("Config load failed", path=path, error_type=type(exc).__name__)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _on_off(enabled: bool) -> str:
    return "on" if enabled else "off"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Hound: inspect and validate search configuration."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.is_production)


@cli.command()
@CONFIG_ARGUMENT
def check(config_path: str | None) -> None:
    """Load a config file and print the effective settings."""
    config = _load(config_path)

    click.echo(config.title)
    click.echo(f"  DB path:       {config.db_path}")
    click.echo(f"  Indexers:      {config.max_concurrent_indexers}")
    click.echo(f"  Health check:  {config.health_check_uri}")
    click.echo(f"  Repositories:  {len(config.repos)}")

    for name in sorted(config.repos):
        repo = config.repos[name]
        click.echo(
            f"  - {name} [{repo.vcs}] every {repo.ms_between_poll}ms "
            f"poll={_on_off(repo.poll_updates_enabled())} "
            f"push={_on_off(repo.push_updates_enabled())}"
        )


@cli.command()
@CONFIG_ARGUMENT
def repos(config_path: str | None) -> None:
    """Print the repository map as JSON, with vcs-config masked."""
    config = _load(config_path)
    try:
        click.echo(config.to_json_string())
    except HoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("repo_name")
@click.argument("path")
@click.option("--config", "-c", "config_path", help="Config file (default: HOUND_CONFIG_PATH)")
@click.option("--line", "-l", type=int, default=None, help="Line number to link to")
def url(repo_name: str, path: str, config_path: str | None, line: int | None) -> None:
    """Print the browse URL for PATH in REPO_NAME."""
    config = _load(config_path)

    repo = config.repos.get(repo_name)
    if repo is None:
        click.echo(f"Error: Unknown repository: {repo_name}", err=True)
        sys.exit(1)

    click.echo(URLResolver(repo).resolve(path, line))


if __name__ == "__main__":
    cli()
