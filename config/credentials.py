"""Server credentials injected into the bootstrap at distribution time."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.placeholders import PADDING_CHARS, SERVER_URL, SETUP_TOKEN


def strip_padding(value: str) -> str:
    """Remove the filler the provisioning server appends to a patched slot."""
    return value.rstrip(PADDING_CHARS)


class CredentialsConfig(BaseSettings):
    """Server URL and setup token, read from the patched slots or the environment."""

    model_config = SettingsConfigDict(
        env_prefix="IMMICH_BOOTSTRAP_",
        validate_default=True,
        extra="ignore",
    )

    server_url: str = SERVER_URL
    setup_token: str = SETUP_TOKEN

    @field_validator("server_url", "setup_token")
    @classmethod
    def _strip_padding(cls, value: str) -> str:
        return strip_padding(value)
