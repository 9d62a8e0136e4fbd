"""
selection.py — Selection Sort
==============================
Each outer pass scans the unsorted suffix for its minimum (one COMPARING
step per element checked against the current minimum), swaps it to the front if it
moved, then marks the front SORTED.
"""

from typing import Generator, Iterable

from bars import Bar
from algorithms.step import Step, StepBuilder


def selection_sort(bars: Iterable[Bar]) -> Generator[Step, None, None]:
    sb = StepBuilder(bars)
    n  = len(sb)

    for i in range(n - 1):
        min_idx = i

        for j in range(i + 1, n):
            sb.compare(min_idx, j)
            sb.explanation = (
                f"Is {sb.value(j)} smaller than the current minimum {sb.value(min_idx)}?"
            )
            yield sb.build()

            if sb.value(j) < sb.value(min_idx):
                min_idx = j

        if min_idx != i:
            sb.swap(i, min_idx)
            sb.explanation = f"Move the minimum {sb.value(i)} to index {i}."
            yield sb.build()

        sb.finalize(i)
        sb.explanation = f"{sb.value(i)} is in its final place."
        yield sb.build()

    yield sb.finish()
