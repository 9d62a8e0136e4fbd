"""
controller.py — Visualizer Command Facade
==========================================
Everything the presentation layer can ask for goes through here:

    generate(size)   start(algo)   pause()   resume()   stop()
    set_speed(n)     set_algorithm(key)      set_size(n)

The controller owns the ArraySource, the Stepper and the current
selection, and enforces which commands are legal when:

  • generate / set_size / set_algorithm  – only while no run is active
  • start                                – refused while RUNNING or PAUSED
  • stop                                 – also regenerates the array
  • set_speed                            – any time, applies to the next tick

Refused commands return False and change nothing.  Each legality check
and the change it guards run under the Stepper's lock, so a timer thread
or a second request thread cannot slip in between.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from bars import ArraySource, Bar, DEFAULT_SIZE
from algorithms import AlgoInfo, require_algorithm
from algorithms.step import Step
from engine.scheduler import Scheduler
from engine.stepper import Stepper, StepperState, DEFAULT_SPEED


log = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "bubble"


class SortController:
    """
    Attributes:
        source    : The randomized input source.
        stepper   : Playback engine for the active run.
        algorithm : Selected registry key.
        bars      : What the canvas should show right now: the freshly
                    generated array, or the last Step's bars during/after a run.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        size: int = DEFAULT_SIZE,
        algorithm: str = DEFAULT_ALGORITHM,
        speed: float = DEFAULT_SPEED,
        seed: Optional[int] = None,
        on_step: Optional[Callable[[Step], None]] = None,
        on_state_change: Optional[Callable[[bool, bool], None]] = None,
    ):
        self.algorithm: str = require_algorithm(algorithm).key
        self.source         = ArraySource(size=size, seed=seed)
        self.bars: List[Bar] = list(self.source.bars)
        self.on_step         = on_step
        self.on_state_change = on_state_change
        self.stepper = Stepper(
            scheduler=scheduler,
            on_step=self._handle_step,
            on_state_change=self._handle_state,
            speed=speed,
        )

    # ------------------------------------------------------------------
    # Flags the UI enables / disables controls on
    # ------------------------------------------------------------------
    @property
    def is_sorting(self) -> bool:
        return self.stepper.is_active

    @property
    def is_paused(self) -> bool:
        return self.stepper.is_paused

    @property
    def algo_info(self) -> AlgoInfo:
        return require_algorithm(self.algorithm)

    # ------------------------------------------------------------------
    # Array commands
    # ------------------------------------------------------------------
    def generate(self, size: Optional[int] = None) -> bool:
        with self.stepper.lock:
            if self.is_sorting:
                log.debug("generate() refused while a run is active")
                return False
            self.bars = self.source.generate(size)
            log.debug("generated %d bars", len(self.bars))
            return True

    def set_size(self, size: int) -> bool:
        return self.generate(size)

    # ------------------------------------------------------------------
    # Run commands
    # ------------------------------------------------------------------
    def start(self, algorithm: Optional[str] = None) -> bool:
        """Refused while a run is active, paused or not; stop() it first."""
        with self.stepper.lock:
            if self.is_sorting:
                log.debug("start() refused while a run is active")
                return False
            if algorithm is not None:
                self.set_algorithm(algorithm)
            info = self.algo_info
            log.info("starting %s on %d bars", info.label, len(self.bars))
            return self.stepper.start(info.fn(self.bars))

    def pause(self) -> bool:
        return self.stepper.pause()

    def resume(self) -> bool:
        return self.stepper.resume()

    def stop(self) -> bool:
        with self.stepper.lock:
            if not self.stepper.stop():
                return False
            self.generate()
            return True

    # ------------------------------------------------------------------
    # Config commands
    # ------------------------------------------------------------------
    def set_speed(self, speed: float) -> None:
        self.stepper.set_speed(speed)

    def set_algorithm(self, key: str) -> bool:
        """Unknown keys raise ValueError; a known key during a run is refused."""
        info = require_algorithm(key)
        with self.stepper.lock:
            if self.is_sorting:
                return False
            self.algorithm = info.key
            return True

    # ------------------------------------------------------------------
    # Snapshot for the web layer
    # ------------------------------------------------------------------
    def state(self) -> Dict[str, Any]:
        last = self.stepper.last_step
        return {
            "algorithm":       self.algorithm,
            "algo_label":      self.algo_info.label,
            "complexity":      self.algo_info.complexity_time,
            "size":            self.source.size,
            "speed":           self.stepper.speed,
            "status":          self.stepper.state.value,
            "is_sorting":      self.is_sorting,
            "is_paused":       self.is_paused,
            "steps_delivered": self.stepper.steps_delivered,
            "bars":            [b.to_dict() for b in self.bars],
            "step":            last.to_dict() if last is not None else None,
        }

    # ------------------------------------------------------------------
    # Stepper callbacks
    # ------------------------------------------------------------------
    def _handle_step(self, step: Step) -> None:
        self.bars = list(step.bars)
        if self.on_step:
            self.on_step(step)

    def _handle_state(self, state: StepperState) -> None:
        if self.on_state_change:
            self.on_state_change(
                state in (StepperState.RUNNING, StepperState.PAUSED),
                state == StepperState.PAUSED,
            )
