"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete sort run (all Steps) without any pacing, then computes
the metrics the UI needs for the Analytics panel and Comparison Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", bars=bars)
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable dump for save/replay

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME array, then calls compare(rec1, rec2) → ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from bars import Bar
from algorithms import AlgoInfo, require_algorithm
from algorithms.step import Step


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    array_size:   int   = 0
    total_steps:  int   = 0          # number of Steps yielded
    comparisons:  int   = 0
    swaps:        int   = 0
    writes:       int   = 0          # insertion shifts/placements, merge placements
    wall_time_ms: float = 0.0        # wall-clock time to run to completion
    memory_bytes: int   = 0          # approx size of the step buffer
    sorted_ok:    bool  = False      # final step non-decreasing and all SORTED


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""
    winner_comparisons: str = ""
    winner_swaps:       str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._input:     List[Bar]          = []
        self._generator                     = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, bars: Iterable[Bar]) -> None:
        """Initialise the generator for this run."""
        info = require_algorithm(algo_key)
        self._algo_info = info
        self._input     = [b.plain() for b in bars]
        self._generator = info.fn(self._input)
        self.steps      = []
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.steps.extend(self._generator)
        wall_ms = (time.monotonic() - started) * 1000
        self._generator = None

        self.metrics = self._compute_metrics(wall_ms)
        log.debug(
            "%s: %d steps, %d comparisons, %d swaps",
            self.metrics.algo_key, self.metrics.total_steps,
            self.metrics.comparisons, self.metrics.swaps,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "input":    [b.value for b in self._input],
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None
        tally = last.metrics if last else {}

        sorted_ok = False
        if last is not None:
            values = last.values
            sorted_ok = (
                last.is_final
                and all(a <= b for a, b in zip(values, values[1:]))
                and all(s == "sorted" for s in last.states)
            )

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.bars)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            array_size=len(self._input),
            total_steps=len(self.steps),
            comparisons=tally.get("comparisons", 0),
            swaps=tally.get("swaps", 0),
            writes=tally.get("writes", 0),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            sorted_ok=sorted_ok,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
    )
