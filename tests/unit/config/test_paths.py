"""Tests for platform profiles and the install directory."""

from pathlib import Path

import pytest

from config.paths import (
    MacOSProfile,
    UnixProfile,
    WindowsProfile,
    get_app_data_dir,
    get_platform_profile,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Fake home directory."""
    home_dir = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home_dir))
    return home_dir


@pytest.mark.parametrize(
    ("system", "profile_type", "os_id"),
    [
        ("Darwin", MacOSProfile, "darwin"),
        ("Windows", WindowsProfile, "windows"),
        ("Linux", UnixProfile, "linux"),
        ("FreeBSD", UnixProfile, "freebsd"),
    ],
)
def test_get_platform_profile(system, profile_type, os_id):
    """Test that each OS family maps onto its profile."""
    profile = get_platform_profile(system)

    assert isinstance(profile, profile_type)
    assert profile.os_id == os_id


def test_only_windows_has_executable_extension():
    """Test that executables carry .exe on Windows only."""
    assert WindowsProfile().executable_extension == ".exe"
    assert MacOSProfile().executable_extension == ""
    assert UnixProfile().executable_extension == ""


def test_macos_app_data_dir(home):
    """Test the macOS Application Support location."""
    assert MacOSProfile().app_data_dir() == (
        home / "Library" / "Application Support" / "ImmichImporter"
    )


def test_windows_app_data_dir_uses_appdata(home, tmp_path, monkeypatch):
    """Test that %APPDATA% wins when set."""
    monkeypatch.setenv("APPDATA", str(tmp_path / "roaming"))

    assert WindowsProfile().app_data_dir() == tmp_path / "roaming" / "ImmichImporter"


def test_windows_app_data_dir_falls_back_to_home(home, monkeypatch):
    """Test the fallback when %APPDATA% is unset."""
    monkeypatch.delenv("APPDATA", raising=False)

    assert WindowsProfile().app_data_dir() == (
        home / "AppData" / "Roaming" / "ImmichImporter"
    )


def test_unix_app_data_dir_uses_xdg(home, tmp_path, monkeypatch):
    """Test that $XDG_CONFIG_HOME wins when set."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))

    assert UnixProfile().app_data_dir() == tmp_path / "cfg" / "immich-importer"


def test_unix_app_data_dir_falls_back_to_home(home, monkeypatch):
    """Test the ~/.config fallback."""
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert UnixProfile().app_data_dir() == home / ".config" / "immich-importer"


def test_get_app_data_dir_creates_directory(tmp_path, monkeypatch):
    """Test that the directory and its parents are created."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "a" / "b"))

    path = get_app_data_dir(UnixProfile())

    assert path == tmp_path / "a" / "b" / "immich-importer"
    assert path.is_dir()


def test_get_app_data_dir_is_idempotent(tmp_path, monkeypatch):
    """Test that an existing directory is reused."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    first = get_app_data_dir(UnixProfile())
    (first / "keep").write_text("x")

    second = get_app_data_dir(UnixProfile())

    assert second == first
    assert (second / "keep").read_text() == "x"
