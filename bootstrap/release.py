"""Release artifact naming and download URLs."""

from __future__ import annotations

import platform
from dataclasses import dataclass

from config.paths import APP_SLUG, PlatformProfile, get_platform_profile
from config.release import ReleaseConfig

# platform.machine() spellings -> release asset architecture names
ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
}


def normalize_arch(machine: str) -> str:
    """Map a machine identifier onto the architecture name used by releases."""
    machine = machine.lower()
    return ARCH_ALIASES.get(machine, machine)


@dataclass(frozen=True)
class Artifact:
    """The importer build for one operating system and architecture."""

    os_id: str
    arch: str
    extension: str = ""

    @property
    def platform(self) -> str:
        return f"{self.os_id}-{self.arch}"

    @property
    def file_name(self) -> str:
        """Asset name on the release page."""
        return f"{APP_SLUG}-{self.platform}{self.extension}"

    @property
    def executable_name(self) -> str:
        """Name of the cached executable."""
        return f"{APP_SLUG}{self.extension}"


def resolve_artifact(
    profile: PlatformProfile | None = None, machine: str | None = None
) -> Artifact:
    """Describe the artifact matching the running platform."""
    profile = profile or get_platform_profile()
    return Artifact(
        os_id=profile.os_id,
        arch=normalize_arch(machine or platform.machine()),
        extension=profile.executable_extension,
    )


def release_download_url(artifact: Artifact, release: ReleaseConfig | None = None) -> str:
    """Build the download URL for ``artifact``."""
    release = release or ReleaseConfig()
    base = f"{release.base_url.rstrip('/')}/{release.repo}/releases"
    if release.is_latest:
        return f"{base}/latest/download/{artifact.file_name}"
    return f"{base}/download/{release.version}/{artifact.file_name}"
