"""
engine/
-------
Playback, command & recording layer.

    from engine import Stepper, SortController, Recorder, compare
"""

from engine.scheduler  import Scheduler, TaskHandle, ThreadingScheduler, ManualScheduler
from engine.stepper    import (
    Stepper,
    StepperState,
    SPEED_PRESETS,
    SPEED_MIN,
    SPEED_MAX,
    DEFAULT_SPEED,
)
from engine.controller import SortController
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Scheduler",
    "TaskHandle",
    "ThreadingScheduler",
    "ManualScheduler",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "SPEED_MIN",
    "SPEED_MAX",
    "DEFAULT_SPEED",
    "SortController",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
