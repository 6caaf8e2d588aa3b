"""One-shot deferred callbacks for a single-threaded game loop.

Nothing runs on its own: the frontend loop calls :meth:`Scheduler.run_due`
every frame (or after each input timeout) and due callbacks run inline.
"""

from __future__ import annotations

import heapq
import itertools
import time
from typing import Callable


class Timer:
    """Handle for a pending callback."""

    __slots__ = ("due", "callback", "cancelled", "fired")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, Timer]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> Timer:
        timer = Timer(self._clock() + max(0.0, delay), callback)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    def run_due(self) -> int:
        """Run every callback whose deadline has passed; return how many ran.

        Callbacks scheduled while running are only picked up if they are
        already due, so a zero-delay chain still terminates per call.
        """
        now = self._clock()
        ran = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            timer.fired = True
            timer.callback()
            ran += 1
        return ran

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if t.pending)

    def clear(self) -> None:
        for _, _, timer in self._queue:
            timer.cancel()
        self._queue.clear()
