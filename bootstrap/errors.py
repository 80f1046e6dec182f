"""Exception classes for the bootstrap."""

from __future__ import annotations


class BootstrapError(Exception):
    """Base exception for all bootstrap errors."""


class ConfigurationError(BootstrapError):
    """Raised when the bootstrap was not patched with server credentials."""

    def __init__(self: ConfigurationError, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class InstallPathError(BootstrapError):
    """Raised when the per-user install directory cannot be resolved or created."""


class DownloadError(BootstrapError):
    """Raised when the importer artifact cannot be downloaded."""


class BadStatusError(DownloadError):
    """Raised when the release server answers with anything but 200 OK."""

    def __init__(
        self: BadStatusError, status_code: int, reason: str | None = None
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"download failed with status: {status}")


class TooManyRedirectsError(DownloadError):
    """Raised when the download URL redirects past the configured cap."""

    def __init__(self: TooManyRedirectsError, max_redirects: int) -> None:
        self.max_redirects = max_redirects
        super().__init__(f"too many redirects (limit {max_redirects})")


class LaunchError(BootstrapError):
    """Raised when the importer process cannot be started at all."""
