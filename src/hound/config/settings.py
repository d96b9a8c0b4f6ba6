"""Tooling settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the hound tooling, loaded from environment variables.

    These only drive logging and the CLI defaults; the config loader
    itself reads nothing from the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: str = "development"
    log_level: str = "INFO"

    # Config file used when the CLI is given none
    config_path: str = "config.json"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
