"""Pytest configuration for the test suite."""

from __future__ import annotations

import pytest

from bootstrap.configuration import Configuration
from config import Config, clear_config_cache
from config.credentials import CredentialsConfig
from config.paths import UnixProfile

BOOTSTRAP_ENV_VARS = (
    "IMMICH_BOOTSTRAP_SERVER_URL",
    "IMMICH_BOOTSTRAP_SETUP_TOKEN",
    "IMMICH_BOOTSTRAP_RELEASE_BASE_URL",
    "IMMICH_BOOTSTRAP_RELEASE_REPO",
    "IMMICH_BOOTSTRAP_RELEASE_VERSION",
    "IMMICH_BOOTSTRAP_HTTP_CHUNK_SIZE",
    "IMMICH_BOOTSTRAP_HTTP_MAX_REDIRECTS",
    "IMMICH_BOOTSTRAP_HTTP_USER_AGENT",
    "LOG_LEVEL",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of every test."""
    for name in BOOTSTRAP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def configuration() -> Configuration:
    """Return a validated configuration."""
    return Configuration(server_url="https://photos.example.com", setup_token="tok-123")


@pytest.fixture
def patched_config() -> Config:
    """Return a config as if the provisioning server had patched the slots."""
    return Config(
        credentials=CredentialsConfig(
            server_url="https://photos.example.com" + "_" * 20,
            setup_token="tok-123\x00\x00\x00",
        )
    )


@pytest.fixture
def xdg_home(tmp_path, monkeypatch):
    """Point the Unix install location into a temp directory."""
    config_home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def unix_profile(xdg_home) -> UnixProfile:
    """Return a Unix profile rooted in the temp XDG directory."""
    return UnixProfile("linux")
