"""Locating and installing the importer executable."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from bootstrap import ui
from bootstrap.downloader import AppDownloader, DownloadResult
from bootstrap.errors import InstallPathError
from bootstrap.launcher import make_executable
from bootstrap.progress import DecileProgress
from bootstrap.release import Artifact
from config.http import HTTPConfig
from config.paths import PlatformProfile, get_app_data_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallLocation:
    """Where the importer is cached."""

    app_dir: Path
    app_path: Path

    def is_installed(self) -> bool:
        return self.app_path.exists()


def prepare_install_location(
    profile: PlatformProfile, artifact: Artifact
) -> InstallLocation:
    """Resolve and create the per-user install directory.

    Raises:
        InstallPathError: If the home directory is unknown or the directory
            cannot be created
    """
    try:
        app_dir = get_app_data_dir(profile)
    except (RuntimeError, KeyError) as e:
        # Path.home() could not resolve a home directory
        raise InstallPathError(f"could not determine home directory: {e}") from e
    except OSError as e:
        raise InstallPathError(f"could not create app directory: {e}") from e

    logger.debug("Using app directory %s", app_dir)
    return InstallLocation(app_dir=app_dir, app_path=app_dir / artifact.executable_name)


async def install_artifact(
    location: InstallLocation,
    download_url: str,
    http_config: HTTPConfig | None = None,
) -> DownloadResult:
    """Download the importer into ``location`` and make it runnable.

    Raises:
        DownloadError: If the download fails; nothing is left at the app path
    """
    downloader = AppDownloader(download_url, http_config)
    result = await downloader.download(location.app_path, DecileProgress(ui.progress))
    ui.info(
        f"  Downloaded: {result.size_mb:.2f} MB (SHA256: {result.sha256[:16]}...)"
    )

    if os.name != "nt":
        try:
            make_executable(location.app_path)
        except OSError as e:
            logger.warning("chmod failed for %s: %s", location.app_path, e)
            ui.warning(f"Warning: Failed to make app executable: {e}")

    return result
