"""Coarse download progress reporting."""

from __future__ import annotations

from collections.abc import Callable


class DecileProgress:
    """Turns (downloaded, total) updates into one notification per 10% boundary.

    Every boundary crossed is reported once, even when a single chunk jumps
    over several of them. Nothing is reported while the total is unknown.
    """

    def __init__(self, notify: Callable[[int], None], step: int = 10) -> None:
        self.notify = notify
        self.step = step
        self._last_reported = 0

    def __call__(self, downloaded: int, total: int) -> None:
        if total <= 0:
            return

        percent = min(downloaded * 100 // total, 100)
        boundary = percent - percent % self.step
        while self._last_reported < boundary:
            self._last_reported += self.step
            self.notify(self._last_reported)
