"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, complexity_time, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble
from algorithms.merge     import merge_sort     as _merge
from algorithms.quick     import quick_sort     as _quick
from algorithms.insertion import insertion_sort as _insertion
from algorithms.selection import selection_sort as _selection
from algorithms.heap      import heap_sort      as _heap
from algorithms.step      import Step, StepBuilder


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function
    complexity_time:   str      = ""          # e.g. "O(n²)", shown next to the label
    complexity_space:  str      = ""          # e.g. "O(1)"
    stable:            bool     = False       # equal values keep input order?
    in_place:          bool     = True
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble,
        complexity_time="O(n²)", complexity_space="O(1)",
        stable=True,
        description="Repeatedly swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge,
        complexity_time="O(n log n)", complexity_space="O(n)",
        stable=True, in_place=False,
        description="Splits in halves, sorts each, merges them back. Left side wins ties.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then sort both sides.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion,
        complexity_time="O(n²)", complexity_space="O(1)",
        stable=True,
        description="Grows a sorted prefix by shifting larger values right and dropping each key in.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it to the front.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap,
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root behind the heap.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    """Like get_algorithm(), but unknown keys are an error."""
    info = REGISTRY.get(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Step",
    "StepBuilder",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
]
