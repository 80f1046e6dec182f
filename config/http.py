"""HTTP configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from config.project import get_project


class HTTPConfig(BaseSettings):
    """HTTP client configurations for the artifact download."""

    model_config = SettingsConfigDict(env_prefix="IMMICH_BOOTSTRAP_HTTP_")

    # Streaming
    chunk_size: int = 32 * 1024

    # GitHub release downloads redirect to a CDN
    max_redirects: int = 10

    user_agent: str = f"ImmichImporterBootstrap/{get_project().version}"
