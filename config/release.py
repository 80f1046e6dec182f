"""Release location settings for the importer artifact."""

from pydantic_settings import BaseSettings, SettingsConfigDict

LATEST = "latest"


class ReleaseConfig(BaseSettings):
    """Where the importer executable is published."""

    model_config = SettingsConfigDict(env_prefix="IMMICH_BOOTSTRAP_RELEASE_")

    base_url: str = "https://github.com"
    repo: str = "immich-app/immich-importer"
    version: str = LATEST

    @property
    def is_latest(self) -> bool:
        """Whether the newest published release is requested."""
        return self.version == LATEST
