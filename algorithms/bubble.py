"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare neighbours j, j+1          →  COMPARING
  2. Exchange them if out of order      →  SWAPPING
  3. End of an outer pass               →  tail element SORTED
  4. Final step                         →  everything SORTED

No early-exit optimisation: an already-sorted array still gets a full
comparison pass per outer iteration, exactly like the textbook loop.
"""

from typing import Generator, Iterable

from bars import Bar
from algorithms.step import Step, StepBuilder


def bubble_sort(bars: Iterable[Bar]) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every comparison and swap.

    Args:
        bars : The input array.  Never mutated; the run works on a copy.

    Yields:
        Step – one per compare, per swap, per finished pass, plus the final step.
    """

    sb = StepBuilder(bars)
    n  = len(sb)

    for i in range(n - 1):
        for j in range(n - i - 1):
            a, b = sb.value(j), sb.value(j + 1)

            # -- comparison --
            sb.compare(j, j + 1)
            sb.explanation = f"Compare {a} and {b}."
            yield sb.build()

            # -- swap if out of order --
            if a > b:
                sb.swap(j, j + 1)
                sb.explanation = f"{a} > {b}: swap them."
                yield sb.build()

        # -- largest remaining value has bubbled to the tail --
        tail = n - i - 1
        sb.finalize(tail)
        sb.explanation = f"Pass {i + 1} done: {sb.value(tail)} is in its final place."
        yield sb.build()

    yield sb.finish()
