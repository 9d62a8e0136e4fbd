"""
merge.py — Merge Sort
======================
Top-down merge sort.  Splitting is silent; every merge yields:
  1. COMPARING [k] before each left-head vs right-head decision
  2. A placement snapshot after each element lands at k
     (from the left run, the right run, or a leftover drain)
then one final all-SORTED sweep.

Ties go to the left run (`<=`), so equal values keep their input order.

The recursion is replayed with an explicit work-stack so deep inputs
cannot hit the interpreter's recursion limit.  After every placement the
unplaced part of the range is rewritten as remaining-left + remaining-right,
which keeps each snapshot a permutation of the input.
"""

from typing import Generator, Iterable, List, Tuple

from bars import Bar
from algorithms.step import Step, StepBuilder


def merge_sort(bars: Iterable[Bar]) -> Generator[Step, None, None]:
    sb = StepBuilder(bars)

    # (left, right, children_done)
    stack: List[Tuple[int, int, bool]] = [(0, len(sb) - 1, False)]
    while stack:
        left, right, children_done = stack.pop()
        if left >= right:
            continue
        mid = (left + right) // 2
        if children_done:
            yield from _merge(sb, left, mid, right)
        else:
            stack.append((left, right, True))
            stack.append((mid + 1, right, False))
            stack.append((left, mid, False))

    yield sb.finish()


def _merge(sb: StepBuilder, left: int, mid: int, right: int) -> Generator[Step, None, None]:
    buf       = sb.buffer
    left_run  = buf[left:mid + 1]
    right_run = buf[mid + 1:right + 1]
    i = j = 0
    k = left

    def place(bar: Bar, explanation: str):
        nonlocal k
        sb.write(k, bar)
        k += 1
        buf[k:right + 1] = left_run[i:] + right_run[j:]
        sb.explanation = explanation

    while i < len(left_run) and j < len(right_run):
        lv, rv = left_run[i].value, right_run[j].value
        sb.compare(k)
        sb.explanation = f"Merge [{left}..{right}]: compare {lv} (left) with {rv} (right)."
        yield sb.build()

        if lv <= rv:
            i += 1
            place(left_run[i - 1], f"Take {lv} from the left run.")
        else:
            j += 1
            place(right_run[j - 1], f"Take {rv} from the right run.")
        yield sb.build()

    while i < len(left_run):
        i += 1
        place(left_run[i - 1], f"Drain {left_run[i - 1].value} from the left run.")
        yield sb.build()

    while j < len(right_run):
        j += 1
        place(right_run[j - 1], f"Drain {right_run[j - 1].value} from the right run.")
        yield sb.build()
