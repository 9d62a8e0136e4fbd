"""
quick.py — Quick Sort (Lomuto partition)
=========================================
The pivot is the last element of the range and never moves until the
closing exchange.  Per partition:
  1. PIVOT step on entry
  2. COMPARING step for every scanned element (pivot still shown)
  3. SWAPPING step for every exchange that grows the "< pivot" prefix
     (including the i == j self-exchange the textbook scheme performs)
  4. One SWAPPING step putting the pivot at its resting index
then the left and right subranges, and finally an all-SORTED sweep.

Recursion is replayed with an explicit stack of pending ranges; the left
subrange is always handled before the right one.
"""

from typing import Generator, Iterable, List, Tuple

from bars import Bar
from algorithms.step import Step, StepBuilder


def quick_sort(bars: Iterable[Bar]) -> Generator[Step, None, None]:
    sb = StepBuilder(bars)

    stack: List[Tuple[int, int]] = [(0, len(sb) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        pi = yield from _partition(sb, low, high)
        stack.append((pi + 1, high))
        stack.append((low, pi - 1))

    yield sb.finish()


def _partition(sb: StepBuilder, low: int, high: int) -> Generator[Step, None, int]:
    """Lomuto partition of [low, high].  Returns the pivot's final index."""
    pivot = sb.value(high)
    i = low - 1

    sb.set_pivot(high)
    sb.explanation = f"Partition [{low}..{high}] around pivot {pivot}."
    yield sb.build()

    for j in range(low, high):
        sb.set_pivot(high)
        sb.compare(j)
        sb.explanation = f"Is {sb.value(j)} < pivot {pivot}?"
        yield sb.build()

        if sb.value(j) < pivot:
            i += 1
            sb.swap(i, j)
            sb.set_pivot(high)
            sb.explanation = f"Yes: move {sb.value(i)} into the smaller-than-pivot block."
            yield sb.build()

    sb.swap(i + 1, high)
    sb.explanation = f"Pivot {pivot} lands at index {i + 1}."
    yield sb.build()

    return i + 1
