"""Runs the cached importer in the foreground."""

from __future__ import annotations

import logging
import stat
import subprocess  # noqa: S404
from pathlib import Path

from bootstrap.configuration import Configuration
from bootstrap.errors import LaunchError

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = (
    stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH
)


def build_command(app_path: Path, configuration: Configuration) -> list[str]:
    """Arguments the importer is started with."""
    return [
        str(app_path),
        "--server",
        configuration.server_url,
        "--token",
        configuration.setup_token,
    ]


def mirror_exit_code(returncode: int) -> int:
    """Translate a child return code into our own exit code.

    A child killed by a signal reports ``-signum``; shells expose that as
    ``128 + signum``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def make_executable(app_path: Path) -> None:
    """Mark the downloaded importer executable (macOS/Linux)."""
    app_path.chmod(app_path.stat().st_mode | EXECUTABLE_MODE)


def launch(app_path: Path, configuration: Configuration) -> int:
    """Run the importer with inherited stdio and wait for it.

    Returns:
        The importer's exit code

    Raises:
        LaunchError: If the process cannot be started at all
    """
    logger.info("Launching %s for %s", app_path, configuration.server_url)
    try:
        completed = subprocess.run(  # noqa: S603
            build_command(app_path, configuration), check=False
        )
    except OSError as e:
        raise LaunchError(str(e)) from e

    logger.info("Importer exited with code %d", completed.returncode)
    return mirror_exit_code(completed.returncode)
