"""Frame pacing at 60 frames per second with a running average."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable

from .geometry import round_point

LIST_LEN_MAX = 120
FPS = 60
UPDATE_INTERVAL = 60


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class Fps:
    """Sleeps between frames to hold 60 fps and measures the real rate."""

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        sleep: Callable[[int], None] | None = None,
    ) -> None:
        self._clock = clock or _now_ms
        self._sleep = sleep or _sleep_ms
        self._times: deque[int] = deque(maxlen=LIST_LEN_MAX)
        self._counter = 0
        self.fps = 0.0

    def wait(self) -> None:
        """Sleep as long as needed, record the frame, refresh the average."""
        self._counter += 1
        self._sleep(self.wait_time())
        self.register()
        if self._counter == UPDATE_INTERVAL:
            self.update_average()
            self._counter = 0

    def register(self) -> None:
        """Record the current time; the oldest entry drops past the limit."""
        self._times.append(self._clock())

    def wait_time(self) -> int:
        """Milliseconds to wait so that the recorded frames keep pace."""
        if not self._times:
            return 0
        should_take = int(1000 / FPS * len(self._times))
        actually_took = self._clock() - self._times[0]
        return max(should_take - actually_took, 0)

    def update_average(self) -> None:
        """Recompute ``fps`` once a full window of frames is recorded."""
        length = len(self._times)
        if length < LIST_LEN_MAX:
            return
        took = self._times[-1] - self._times[0]
        average = took / (length - 1)
        if average == 0:
            return
        self.fps = round_point(1000 / average, 2)