"""
stepper.py — Timed Playback Engine
===================================
The Stepper pulls Steps out of a sort generator one at a time, hands each
one to the renderer callback, and schedules the next pull after
`1 / speed` seconds.

State machine:
    IDLE / COMPLETED  →  start()     →  RUNNING
    RUNNING           →  pause()     →  PAUSED
    PAUSED            →  resume()    →  RUNNING
    RUNNING           →  (exhausted) →  COMPLETED
    RUNNING / PAUSED  →  stop()      →  IDLE

start() while RUNNING is refused.  start() while PAUSED tears the paused
run down first.

Stale ticks:
  Every armed tick remembers the run token it was armed for.  When it
  fires it re-reads the Stepper's *current* state under the lock and
  does nothing unless the token still matches, the state is RUNNING and
  it is still the pending handle.  A tick that slipped past cancel() can
  therefore never deliver into a paused, stopped or newer run.

Thread safety:
  All public methods and the tick body run under one RLock.  Callbacks
  are invoked while it is held, so they may call back into the Stepper
  but must not block on another thread that needs it.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Generator, Optional

from algorithms.step import Step
from engine.scheduler import Scheduler, TaskHandle, ThreadingScheduler


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    PAUSED    = "paused"
    COMPLETED = "completed"


# ---------------------------------------------------------------------------
# Speed (steps per second)
# ---------------------------------------------------------------------------
SPEED_MIN     = 1
SPEED_MAX     = 100
DEFAULT_SPEED = 50

SPEED_PRESETS = {
    "slow":   2,      # teaching mode
    "medium": 10,
    "fast":   50,     # demo mode
    "turbo":  100,
}


def clamp_speed(speed: float) -> int:
    return int(max(SPEED_MIN, min(SPEED_MAX, speed)))


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state           : Current StepperState.
        speed           : Steps per second, 1–100.
        steps_delivered : Steps handed to on_step in the current run.
        last_step       : Most recent Step delivered (kept on completion, cleared by stop()).
        on_step         : callback(Step) fired once per delivered Step.
        on_state_change : callback(StepperState) fired on every transition.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        on_step: Optional[Callable[[Step], None]] = None,
        on_state_change: Optional[Callable[[StepperState], None]] = None,
        speed: float = DEFAULT_SPEED,
    ):
        self.scheduler:       Scheduler       = scheduler or ThreadingScheduler()
        self.on_step:         Optional[Callable[[Step], None]]         = on_step
        self.on_state_change: Optional[Callable[[StepperState], None]] = on_state_change
        self.state:           StepperState    = StepperState.IDLE
        self.speed:           int             = clamp_speed(speed)
        self.steps_delivered: int             = 0
        self.last_step:       Optional[Step]  = None

        self._generator: Optional[Generator[Step, None, None]] = None
        self._pending:   Optional[TaskHandle] = None
        self._run_id:    int                  = 0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Generator[Step, None, None]) -> bool:
        """Attach a fresh sort generator and deliver its first Step."""
        with self._lock:
            if self.state == StepperState.RUNNING:
                log.debug("start() ignored: a run is already playing")
                return False
            if self.state == StepperState.PAUSED:
                self._teardown()

            self._run_id         += 1
            self._generator       = generator
            self.steps_delivered  = 0
            self.last_step        = None
            log.info("run %d started at %d steps/s", self._run_id, self.speed)
            self._set_state(StepperState.RUNNING)
            self._advance()
            return True

    def stop(self) -> bool:
        """Abandon the current run wherever it is.  Back to IDLE."""
        with self._lock:
            if self.state not in (StepperState.RUNNING, StepperState.PAUSED):
                return False
            log.info("run %d stopped after %d steps", self._run_id, self.steps_delivered)
            self._teardown()
            self.last_step = None
            self._set_state(StepperState.IDLE)
            return True

    # ------------------------------------------------------------------
    # Pause / Resume
    # ------------------------------------------------------------------
    def pause(self) -> bool:
        with self._lock:
            if self.state != StepperState.RUNNING:
                return False
            self._cancel_pending()
            self._set_state(StepperState.PAUSED)
            return True

    def resume(self) -> bool:
        with self._lock:
            if self.state != StepperState.PAUSED:
                return False
            self._set_state(StepperState.RUNNING)
            self._advance()
            return True

    def toggle_play(self) -> bool:
        with self._lock:
            if self.state == StepperState.RUNNING:
                return self.pause()
            return self.resume()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed: float) -> None:
        """Takes effect the next time a tick is armed."""
        with self._lock:
            self.speed = clamp_speed(speed)

    def set_speed_preset(self, preset: str) -> None:
        self.set_speed(SPEED_PRESETS.get(preset, DEFAULT_SPEED))

    @property
    def delay(self) -> float:
        """Seconds between two pulls."""
        return 1.0 / self.speed

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state == StepperState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state == StepperState.PAUSED

    @property
    def is_active(self) -> bool:
        """A run exists and has not ended: RUNNING or PAUSED."""
        return self.state in (StepperState.RUNNING, StepperState.PAUSED)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.COMPLETED

    @property
    def lock(self):
        """Held by every transition; callers take it to check-then-act atomically."""
        return self._lock

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _arm(self) -> None:
        self._cancel_pending()
        run_id = self._run_id
        handle: Optional[TaskHandle] = None

        def fire():
            # a fast timer may fire before call_later returns; the lock
            # holds it off until `handle` and `_pending` are both set
            with self._lock:
                self._on_tick(run_id, handle)

        handle = self.scheduler.call_later(self.delay, fire)
        self._pending = handle

    def _on_tick(self, run_id: int, handle: Optional[TaskHandle]) -> None:
        with self._lock:
            if (
                run_id != self._run_id
                or self.state != StepperState.RUNNING
                or handle is not self._pending
            ):
                log.debug("dropping stale tick for run %d", run_id)
                return
            self._pending = None
            self._advance()

    def _advance(self) -> None:
        """Pull one Step: deliver it and re-arm, or complete the run."""
        try:
            step = next(self._generator)
        except StopIteration:
            log.info("run %d completed after %d steps", self._run_id, self.steps_delivered)
            self._generator = None
            self._pending   = None
            self._set_state(StepperState.COMPLETED)
            return

        self.steps_delivered += 1
        self.last_step        = step
        if self.on_step:
            self.on_step(step)

        # on_step may have paused or stopped us
        if self.state == StepperState.RUNNING and self._pending is None:
            self._arm()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _teardown(self) -> None:
        self._cancel_pending()
        if self._generator is not None:
            self._generator.close()
        self._generator = None
        self._run_id   += 1

    def _set_state(self, state: StepperState) -> None:
        if state == self.state:
            return
        log.debug("%s -> %s", self.state.value, state.value)
        self.state = state
        if self.on_state_change:
            self.on_state_change(state)
