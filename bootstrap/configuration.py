"""Validation of the build-time server credentials."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bootstrap.errors import ConfigurationError
from config.credentials import CredentialsConfig
from config.placeholders import PLACEHOLDER_PREFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    """Validated values handed to the importer."""

    server_url: str
    setup_token: str

    def __repr__(self) -> str:
        return f"Configuration(server_url={self.server_url!r}, setup_token='***')"


def _require(field: str, value: str) -> str:
    if not value:
        raise ConfigurationError(field, "value is empty")
    if value.startswith(PLACEHOLDER_PREFIX):
        raise ConfigurationError(field, "placeholder was never patched")
    return value


def load_configuration(credentials: CredentialsConfig | None = None) -> Configuration:
    """Load and validate the server URL and setup token.

    Args:
        credentials: Already-stripped credentials; read from the patched
            slots and environment when omitted

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If either value is empty or still a placeholder
    """
    credentials = credentials or CredentialsConfig()
    configuration = Configuration(
        server_url=_require("server_url", credentials.server_url),
        setup_token=_require("setup_token", credentials.setup_token),
    )
    logger.debug("Loaded configuration for %s", configuration.server_url)
    return configuration
