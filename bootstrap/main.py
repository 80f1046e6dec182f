"""Bootstrap flow: check configuration, fetch the importer, hand over."""

from __future__ import annotations

import asyncio
import logging

from bootstrap import ui
from bootstrap.configuration import load_configuration
from bootstrap.errors import (
    ConfigurationError,
    DownloadError,
    InstallPathError,
    LaunchError,
)
from bootstrap.install import install_artifact, prepare_install_location
from bootstrap.launcher import launch
from bootstrap.release import release_download_url, resolve_artifact
from config import Config, get_config
from config.paths import PlatformProfile, get_platform_profile

logger = logging.getLogger(__name__)

BANNER = "Immich Google Photos Importer - Bootstrap"
EXIT_FAILURE = 1


def run(
    config: Config | None = None, profile: PlatformProfile | None = None
) -> int:
    """Run the bootstrap and return the process exit code."""
    config = config or get_config()

    ui.header(BANNER)

    try:
        configuration = load_configuration(config.credentials)
    except ConfigurationError as e:
        logger.debug("Configuration rejected: %s", e)
        ui.error("Error: This bootstrap binary was not properly configured.")
        ui.error("Please download a fresh copy from your Immich server.")
        return EXIT_FAILURE

    ui.info(f"Server: {configuration.server_url}")
    ui.blank()

    profile = profile or get_platform_profile()
    artifact = resolve_artifact(profile)

    try:
        location = prepare_install_location(profile, artifact)
    except InstallPathError as e:
        ui.error(f"Error preparing app directory: {e}")
        return EXIT_FAILURE

    if location.is_installed():
        # No version check: whatever is cached gets used
        ui.info("Found existing importer, checking for updates...")
    else:
        download_url = release_download_url(artifact, config.release)
        ui.info("Downloading importer from GitHub...")
        ui.info(f"URL: {download_url}")
        ui.blank()

        try:
            asyncio.run(install_artifact(location, download_url, config.http))
        except DownloadError as e:
            logger.debug("Download of %s failed", download_url, exc_info=True)
            ui.error(f"Failed to download importer: {e}")
            ui.error("")
            ui.error("Please check your internet connection and try again.")
            ui.error("If the problem persists, the release may not be available yet.")
            return EXIT_FAILURE

        ui.success("Download complete!")

    ui.blank()
    ui.info("Launching Immich Importer...")
    ui.blank()

    try:
        return launch(location.app_path, configuration)
    except LaunchError as e:
        ui.error(f"Error running importer: {e}")
        return EXIT_FAILURE
