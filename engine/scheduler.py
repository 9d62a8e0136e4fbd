"""
scheduler.py — Delayed-Callback Schedulers
===========================================
The Stepper never sleeps.  It asks a scheduler to call it back later and
keeps the returned TaskHandle so it can cancel the tick on pause / stop.

    ThreadingScheduler  – real time, one daemon threading.Timer per tick.
                          Used by the web app.
    ManualScheduler     – virtual clock, nothing fires until the caller
                          advances it.  Used by tests and by anything
                          that wants deterministic playback.

Both hand out handles with the same cancel() contract: once cancel()
returns, that callback will not start.
"""

import heapq
import itertools
import threading
from typing import Callable, List, Optional, Tuple


class TaskHandle:
    """One scheduled callback.  cancel() is idempotent."""

    def __init__(self, delay: float):
        self.delay:      float = delay
        self._cancelled: bool  = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class Scheduler:
    def call_later(self, delay: float, callback: Callable[[], None]) -> TaskHandle:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Real-time scheduler
# ---------------------------------------------------------------------------
class _TimerHandle(TaskHandle):
    def __init__(self, delay: float, timer: threading.Timer):
        super().__init__(delay)
        self._timer = timer

    def cancel(self) -> None:
        super().cancel()
        self._timer.cancel()


class ThreadingScheduler(Scheduler):
    """
    Fires each callback on its own timer thread.  The callback runs only if
    the handle has not been cancelled by then; the Stepper's lock makes
    the check-and-deliver atomic on its side.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TaskHandle:
        handle: Optional[_TimerHandle] = None

        def fire():
            if handle is not None and not handle.cancelled:
                callback()

        timer = threading.Timer(max(0.0, delay), fire)
        timer.daemon = True
        handle = _TimerHandle(delay, timer)
        timer.start()
        return handle


# ---------------------------------------------------------------------------
# Virtual-clock scheduler
# ---------------------------------------------------------------------------
class ManualScheduler(Scheduler):
    """
    Attributes:
        now : Virtual time in seconds.  Only advance()/run_next() move it.

    Callbacks due at the same instant fire in scheduling order.
    """

    def __init__(self):
        self.now: float = 0.0
        self._queue: List[Tuple[float, int, TaskHandle, Callable[[], None]]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TaskHandle:
        handle = TaskHandle(delay)
        heapq.heappush(self._queue, (self.now + max(0.0, delay), next(self._seq), handle, callback))
        return handle

    @property
    def pending(self) -> int:
        """Number of scheduled, not-cancelled callbacks."""
        return sum(1 for _, _, h, _ in self._queue if not h.cancelled)

    def run_next(self) -> bool:
        """Jump the clock to the next live callback and fire it."""
        while self._queue:
            due, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = max(self.now, due)
            callback()
            return True
        return False

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing everything that falls due.  Returns #fired."""
        target = self.now + seconds
        fired  = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = max(self.now, due)
            callback()
            fired += 1
        self.now = target
        return fired

    def run_until_idle(self, limit: Optional[int] = None) -> int:
        """Fire callbacks until none are left (or `limit` have fired)."""
        fired = 0
        while limit is None or fired < limit:
            if not self.run_next():
                break
            fired += 1
        return fired
