"""Time sources injected into the election controller.

A clock is any zero-argument callable returning the current time as an int.
"""

import time
from collections.abc import Callable

Clock = Callable[[], int]


class ManualClock:
    """Clock moved explicitly by the caller. Never goes backwards."""

    def __init__(self, now: int = 0):
        self._now = now

    def __call__(self) -> int:
        return self._now

    @property
    def now(self) -> int:
        return self._now

    def set(self, now: int) -> None:
        if now < self._now:
            raise ValueError(f"Clock cannot move backwards: {now} < {self._now}")
        self._now = now

    def advance(self, seconds: int) -> None:
        self.set(self._now + seconds)


class SystemClock:
    """Epoch seconds from the host, clamped to be non-decreasing."""

    def __init__(self):
        self._last = 0

    def __call__(self) -> int:
        self._last = max(self._last, int(time.time()))
        return self._last
