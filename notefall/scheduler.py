"""Virtual-time event queue polled once per frame."""
from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(order=True)
class ScheduledEvent:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    interval: Optional[float] = field(default=None, compare=False)


class Scheduler:
    """Runs callbacks once their due time is reached by :meth:`advance`.

    Events fire in due-time order, ties in scheduling order. Nothing can be
    cancelled once scheduled.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: List[ScheduledEvent] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]):
        heapq.heappush(self._queue, ScheduledEvent(self.now + delay, next(self._counter), callback))

    def call_every(self, interval: float, callback: Callable[[], None]):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        heapq.heappush(
            self._queue,
            ScheduledEvent(self.now + interval, next(self._counter), callback, interval),
        )

    def advance(self, dt: float) -> int:
        """Move the clock forward by ``dt`` and fire due events."""
        target = self.now + dt
        fired = 0
        while self._queue and self._queue[0].due <= target:
            event = heapq.heappop(self._queue)
            self.now = event.due
            if event.interval is not None:
                event.due += event.interval
                event.seq = next(self._counter)
                heapq.heappush(self._queue, event)
            event.callback()
            fired += 1
        self.now = target
        return fired

    @property
    def pending(self) -> int:
        return len(self._queue)
