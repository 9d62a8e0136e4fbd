"""
step.py — Sort Step Snapshot
=============================
Every sorting algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The whole array, each bar already carrying its highlight state
    • Which indices are being compared / were just swapped
    • Which indices were finalized by this step
    • The quicksort pivot, when there is one
    • A plain-English explanation of what just happened
    • Running counters (comparisons, swaps, writes)

Design decisions:
  - Step is a frozen dataclass holding tuples, so a snapshot can never
    alias the generator's working buffer.
  - Highlights are recomputed from scratch for every snapshot: positions
    finalized so far are SORTED, then this step's comparing, swapping and
    pivot indices are painted on top (in that order).  Nothing else
    carries over from the previous step.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Iterable, Set, Tuple

from bars import Bar, BarState


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number    : 0-based index of this step in the run.
        bars           : Full array snapshot, highlight states resolved.
        comparing      : 1–2 indices under comparison (empty if none).
        swapping       : The 2 indices just exchanged (empty if none).
        sorted_indices : Indices finalized by THIS step (all of them on the final step).
        pivot          : Quicksort pivot index, or None.
        explanation    : Human-readable "what happened" text.
        metrics        : Running tally: comparisons, swaps, writes.
        is_final       : True on the very last, all-sorted step.
    """

    step_number:     int                    = 0
    bars:            Tuple[Bar, ...]        = ()
    comparing:       Tuple[int, ...]        = ()
    swapping:        Tuple[int, ...]        = ()
    sorted_indices:  Tuple[int, ...]        = ()
    pivot:           Optional[int]          = None
    explanation:     str                    = ""
    metrics:         Dict[str, int]         = field(default_factory=dict)
    is_final:        bool                   = False

    @property
    def values(self) -> List[int]:
        return [b.value for b in self.bars]

    @property
    def states(self) -> List[str]:
        return [b.state.value for b in self.bars]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":    self.step_number,
            "bars":           [b.to_dict() for b in self.bars],
            "comparing":      list(self.comparing),
            "swapping":       list(self.swapping),
            "sorted_indices": list(self.sorted_indices),
            "pivot":          self.pivot,
            "explanation":    self.explanation,
            "metrics":        dict(self.metrics),
            "is_final":       self.is_final,
        }


# ---------------------------------------------------------------------------
# Builder — owns the run's working buffer, emits copied Steps
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that algorithms use to construct Steps cleanly.

    Usage inside an algorithm generator:
        sb = StepBuilder(bars)
        sb.compare(j, j + 1)
        sb.explanation = "Compare 42 and 17."
        yield sb.build()

    `buffer` is the run's working array.  Algorithms read and reorder it
    directly (or through swap()/write() so the counters stay right).
    build() snapshots it and clears the per-step annotations.
    """

    def __init__(self, bars: Iterable[Bar]):
        self.buffer:    List[Bar]       = [b.plain() for b in bars]
        self.finalized: Set[int]        = set()
        self.metrics:   Dict[str, int]  = {"comparisons": 0, "swaps": 0, "writes": 0}
        self.step_no:   int             = 0
        self.reset()

    def reset(self):
        self.comparing:       Tuple[int, ...] = ()
        self.swapping:        Tuple[int, ...] = ()
        self.sorted_indices:  Tuple[int, ...] = ()
        self.pivot:           Optional[int]   = None
        self.explanation:     str             = ""

    def __len__(self) -> int:
        return len(self.buffer)

    def value(self, idx: int) -> int:
        return self.buffer[idx].value

    # -- helpers --
    def compare(self, *indices: int, count: bool = True):
        self.comparing = tuple(indices)
        if count:
            self.metrics["comparisons"] += 1

    def swap(self, i: int, j: int):
        self.buffer[i], self.buffer[j] = self.buffer[j], self.buffer[i]
        self.swapping = (i, j)
        self.metrics["swaps"] += 1

    def write(self, idx: int, bar: Bar):
        self.buffer[idx] = bar
        self.metrics["writes"] += 1

    def set_pivot(self, idx: int):
        self.pivot = idx

    def finalize(self, *indices: int):
        self.finalized.update(indices)
        self.sorted_indices = tuple(indices)

    def build(self, is_final: bool = False) -> Step:
        """Snapshot the buffer and reset the per-step annotations."""
        source = self.buffer
        states = [BarState.DEFAULT] * len(source)
        for i in self.finalized:
            states[i] = BarState.SORTED
        for i in self.comparing:
            states[i] = BarState.COMPARING
        for i in self.swapping:
            states[i] = BarState.SWAPPING
        if self.pivot is not None:
            states[self.pivot] = BarState.PIVOT

        step = Step(
            step_number=self.step_no,
            bars=tuple(b.with_state(s) for b, s in zip(source, states)),
            comparing=self.comparing,
            swapping=self.swapping,
            sorted_indices=self.sorted_indices,
            pivot=self.pivot,
            explanation=self.explanation,
            metrics=dict(self.metrics),
            is_final=is_final,
        )
        self.step_no += 1
        self.reset()
        return step

    def finish(self, explanation: str = "") -> Step:
        """The terminal snapshot: every position SORTED."""
        self.reset()
        everything = tuple(range(len(self.buffer)))
        self.finalize(*everything)
        self.explanation = explanation or "Done: the array is sorted."
        return self.build(is_final=True)
