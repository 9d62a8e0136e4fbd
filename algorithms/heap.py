"""
heap.py — Heap Sort
====================
Phase 1 builds a max-heap bottom-up (sift-down on every non-leaf, highest
index first).  Phase 2 repeatedly swaps the root with the last unsorted
slot, marks that slot SORTED and sifts the new root down the shrunken heap.

Each sift-down level yields up to two COMPARING steps (left child, then
right child, each against the largest-so-far) and a SWAPPING step when
the parent has to move down.
"""

from typing import Generator, Iterable

from bars import Bar
from algorithms.step import Step, StepBuilder


def heap_sort(bars: Iterable[Bar]) -> Generator[Step, None, None]:
    sb = StepBuilder(bars)
    n  = len(sb)

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(sb, n, i)

    for end in range(n - 1, 0, -1):
        sb.swap(0, end)
        sb.explanation = f"Move the max {sb.value(end)} to index {end}."
        yield sb.build()

        # shows up as SORTED from the next snapshot on
        sb.finalized.add(end)
        yield from _heapify(sb, end, 0)

    yield sb.finish()


def _heapify(sb: StepBuilder, size: int, root: int) -> Generator[Step, None, None]:
    """Sift buffer[root] down within the first `size` slots."""
    while True:
        largest = root
        left    = 2 * root + 1
        right   = 2 * root + 2

        if left < size:
            sb.compare(left, largest)
            sb.explanation = f"Heapify {root}: compare left child {sb.value(left)} with {sb.value(largest)}."
            yield sb.build()
            if sb.value(left) > sb.value(largest):
                largest = left

        if right < size:
            sb.compare(right, largest)
            sb.explanation = f"Heapify {root}: compare right child {sb.value(right)} with {sb.value(largest)}."
            yield sb.build()
            if sb.value(right) > sb.value(largest):
                largest = right

        if largest == root:
            return

        sb.swap(root, largest)
        sb.explanation = f"Sift {sb.value(largest)} down to index {largest}."
        yield sb.build()
        root = largest
