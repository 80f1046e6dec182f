"""Configuration module - orchestrates all configuration components."""

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.credentials import CredentialsConfig
from config.http import HTTPConfig
from config.release import ReleaseConfig
from config.runtime import RuntimeConfig


class Config(BaseSettings):
    """Main configuration container that orchestrates all config components."""

    # Server URL and setup token
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)

    # HTTP configurations
    http: HTTPConfig = Field(default_factory=HTTPConfig)

    # Release location
    release: ReleaseConfig = Field(default_factory=ReleaseConfig)

    # Runtime configurations
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


@cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    get_config.cache_clear()


__all__ = ["Config", "get_config", "clear_config_cache"]
