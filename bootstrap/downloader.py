"""App downloader for the bootstrap."""

from __future__ import annotations

import contextlib
import hashlib
import logging
import os
import ssl
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import aiohttp
import certifi

from bootstrap.errors import BadStatusError, DownloadError, TooManyRedirectsError
from config.http import HTTPConfig

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class DownloadResult:
    """Outcome of a finished download."""

    path: Path
    size: int
    sha256: str

    @property
    def size_mb(self) -> float:
        return self.size / 1024 / 1024


class AppDownloader:
    """Downloads the importer executable into place atomically.

    The body is streamed into a temporary file next to the destination and
    renamed over it only once complete, so the destination is either absent
    or fully written.
    """

    def __init__(self, download_url: str, http_config: HTTPConfig | None = None):
        self.download_url = download_url
        self.http_config = http_config or HTTPConfig()
        self.chunk_size = self.http_config.chunk_size

    async def download(
        self,
        destination: Path,
        progress_callback: ProgressCallback | None = None,
    ) -> DownloadResult:
        """Download the app to ``destination``.

        Args:
            destination: Final path of the executable
            progress_callback: Optional callback(downloaded, total); total is 0
                when the server does not announce a length

        Returns:
            Size and SHA-256 of what was written

        Raises:
            DownloadError: On any failure; the temp file is removed and
                ``destination`` is left untouched
        """
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix="download-", suffix=".tmp", dir=destination.parent
            )
        except OSError as e:
            raise DownloadError(f"failed to create temp file: {e}") from e

        temp_path = Path(temp_name)
        logger.debug("Downloading %s via %s", self.download_url, temp_path)
        file = os.fdopen(fd, "wb")
        try:
            size, digest = await self._stream_to(file, progress_callback)

            # Close temp file before rename
            try:
                file.close()
            except OSError as e:
                raise DownloadError(f"failed to close temp file: {e}") from e

            self._move_into_place(temp_path, destination)
        except BaseException:
            with contextlib.suppress(OSError):
                file.close()
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Downloaded %d bytes to %s (sha256=%s)", size, destination, digest)
        return DownloadResult(path=destination, size=size, sha256=digest)

    def _session(self) -> aiohttp.ClientSession:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        return aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(ssl=ssl_context),
            headers={"User-Agent": self.http_config.user_agent},
            # The transfer has no deadline
            timeout=aiohttp.ClientTimeout(total=None),
        )

    async def _stream_to(
        self, file: BinaryIO, progress_callback: ProgressCallback | None
    ) -> tuple[int, str]:
        """Fetch the URL and write the body to ``file``, hashing as it goes."""
        hasher = hashlib.sha256()
        written = 0

        try:
            async with (
                self._session() as session,
                session.get(
                    self.download_url, max_redirects=self.http_config.max_redirects
                ) as response,
            ):
                if response.history:
                    logger.debug(
                        "Followed %d redirect(s) to %s",
                        len(response.history),
                        response.url,
                    )
                if response.status != 200:
                    raise BadStatusError(response.status, response.reason)

                total = response.content_length or 0

                try:
                    async for chunk in response.content.iter_chunked(self.chunk_size):
                        try:
                            count = file.write(chunk)
                        except OSError as e:
                            raise DownloadError(f"failed to write: {e}") from e
                        if count != len(chunk):
                            raise DownloadError("short write")

                        hasher.update(chunk)
                        written += count
                        if progress_callback:
                            progress_callback(written, total)
                except aiohttp.ClientError as e:
                    raise DownloadError(f"failed to read: {e}") from e
        except aiohttp.TooManyRedirects as e:
            raise TooManyRedirectsError(self.http_config.max_redirects) from e
        except aiohttp.ClientError as e:
            raise DownloadError(f"failed to download: {e}") from e

        return written, hasher.hexdigest()

    def _move_into_place(self, temp_path: Path, destination: Path) -> None:
        """Atomically move the finished temp file onto ``destination``."""
        try:
            temp_path.replace(destination)
        except OSError as e:
            if os.name != "nt":
                raise DownloadError(f"failed to move downloaded file: {e}") from e

            # Windows refuses to replace a file that is in use
            logger.debug("Replace failed (%s), removing %s and retrying", e, destination)
            try:
                destination.unlink(missing_ok=True)
                temp_path.replace(destination)
            except OSError as retry_error:
                raise DownloadError(
                    f"failed to move downloaded file: {retry_error}"
                ) from retry_error
