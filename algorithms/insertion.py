"""
insertion.py — Insertion Sort
==============================
Generator-based insertion sort.  Per key:
  1. Pick up key i                              →  COMPARING [i]
  2. For every larger element to its left:
       compare j, j+1                           →  COMPARING [j, j+1]
       shift a[j] right                         →  shift snapshot
  3. Drop the key into the hole                 →  placement snapshot

Shifting is an overwrite, not a swap.  The carried key sits in the
vacated slot of the working buffer, so no frame ever displays one
value twice.
"""

from typing import Generator, Iterable

from bars import Bar
from algorithms.step import Step, StepBuilder


def insertion_sort(bars: Iterable[Bar]) -> Generator[Step, None, None]:
    sb  = StepBuilder(bars)
    buf = sb.buffer
    n   = len(sb)

    for i in range(1, n):
        key = buf[i]
        j   = i - 1

        sb.compare(i, count=False)
        sb.explanation = f"Pick up {key.value} and insert it into the sorted prefix."
        yield sb.build()

        while j >= 0 and buf[j].value > key.value:
            sb.compare(j, j + 1)
            sb.explanation = f"{buf[j].value} > {key.value}: shift {buf[j].value} right."
            yield sb.build()

            sb.write(j + 1, buf[j])
            j -= 1
            # the key rides in the hole; only the final drop counts as a write
            buf[j + 1] = key
            sb.explanation = f"Shifted; the hole is now at index {j + 1}."
            yield sb.build()

        sb.write(j + 1, key)
        sb.explanation = f"Place {key.value} at index {j + 1}."
        yield sb.build()

    yield sb.finish()
