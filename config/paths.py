"""
Centralized path management for the bootstrap.

Each supported operating system family gets a platform profile that knows
where per-user application data lives and which suffix executables carry.
"""

from __future__ import annotations

import os
import platform
from abc import ABC, abstractmethod
from pathlib import Path

APP_NAME = "ImmichImporter"
APP_SLUG = "immich-importer"


class PlatformProfile(ABC):
    """Per-OS conventions for the install location."""

    os_id: str
    executable_extension: str = ""

    @abstractmethod
    def app_data_dir(self) -> Path:
        """Return the per-user application directory (not created)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(os_id={self.os_id!r})"


class MacOSProfile(PlatformProfile):
    """macOS keeps app data under ~/Library/Application Support."""

    os_id = "darwin"

    def app_data_dir(self) -> Path:
        return Path.home() / "Library" / "Application Support" / APP_NAME


class WindowsProfile(PlatformProfile):
    """Windows roams app data through %APPDATA%."""

    os_id = "windows"
    executable_extension = ".exe"

    def app_data_dir(self) -> Path:
        # Use APPDATA environment variable or fallback
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME


class UnixProfile(PlatformProfile):
    """Linux and other Unix-likes follow the XDG Base Directory Specification."""

    def __init__(self, os_id: str = "linux") -> None:
        self.os_id = os_id

    def app_data_dir(self) -> Path:
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / APP_SLUG
        return Path.home() / ".config" / APP_SLUG


def get_platform_profile(system: str | None = None) -> PlatformProfile:
    """Pick the profile for ``system`` (defaults to the running OS)."""
    system = system or platform.system()

    if system == "Darwin":
        return MacOSProfile()
    if system == "Windows":
        return WindowsProfile()
    return UnixProfile(system.lower() or "linux")


def get_app_data_dir(profile: PlatformProfile | None = None) -> Path:
    """
    Get the per-user directory the importer is cached in.

    Ensures the directory (and its parents) exist.
    """
    profile = profile or get_platform_profile()
    path = profile.app_data_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = [
    "APP_NAME",
    "APP_SLUG",
    "MacOSProfile",
    "PlatformProfile",
    "UnixProfile",
    "WindowsProfile",
    "get_app_data_dir",
    "get_platform_profile",
]
