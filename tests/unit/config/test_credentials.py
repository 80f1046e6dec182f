"""Tests for the injected credential settings."""

import pytest

from config.credentials import CredentialsConfig, strip_padding
from config.placeholders import SERVER_URL, SETUP_TOKEN, SLOT_LENGTH


def test_placeholders_keep_their_slot_length():
    """Test that the patchable slots are exactly 128 characters."""
    assert len(SERVER_URL) == SLOT_LENGTH
    assert len(SETUP_TOKEN) == SLOT_LENGTH


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("https://photos.example.com____", "https://photos.example.com"),
        ("https://photos.example.com\x00\x00", "https://photos.example.com"),
        ("https://photos.example.com  ", "https://photos.example.com"),
        ("token_\x00 _", "token"),
        ("____", ""),
        ("", ""),
    ],
)
def test_strip_padding(raw, expected):
    """Test that every filler character is stripped from the right."""
    assert strip_padding(raw) == expected


def test_strip_padding_keeps_leading_characters():
    """Test that only trailing filler is removed."""
    assert strip_padding("__abc__") == "__abc"


def test_defaults_are_stripped_placeholders():
    """Test that unpatched slots still carry the placeholder prefix."""
    credentials = CredentialsConfig()

    assert credentials.server_url == "__IMMICH_SERVER_URL_PLACEHOLDER"
    assert credentials.setup_token == "__IMMICH_SETUP_TOKEN_PLACEHOLDER"


def test_environment_overrides(monkeypatch):
    """Test that environment variables replace the slots and are stripped."""
    monkeypatch.setenv("IMMICH_BOOTSTRAP_SERVER_URL", "https://env.example.com___")
    monkeypatch.setenv("IMMICH_BOOTSTRAP_SETUP_TOKEN", "env-token")

    credentials = CredentialsConfig()

    assert credentials.server_url == "https://env.example.com"
    assert credentials.setup_token == "env-token"


def test_init_values_are_stripped():
    """Test that explicit values are validated too."""
    credentials = CredentialsConfig(server_url="https://x.example  ", setup_token="t\x00")

    assert credentials.server_url == "https://x.example"
    assert credentials.setup_token == "t"
