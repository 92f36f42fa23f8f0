"""ScanContext — cancellation and deadline for a single scan."""

from __future__ import annotations

import time

from lic.exceptions import ScanCancelledError


class ScanContext:
    """Carries the caller's cancellation signal through collectors and providers.

    Checked before every blocking step (collector run, API attempt, sleep);
    a running step is never interrupted by :meth:`cancel`.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._cancelled = False
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        if self._cancelled:
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise ScanCancelledError("scan cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise ScanCancelledError("scan deadline exceeded")
