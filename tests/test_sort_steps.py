"""Hand-traced step sequences for small inputs."""

from bars import bars_from_values
from algorithms import require_algorithm

from conftest import run_steps


def count(steps, attr):
    return sum(1 for s in steps if getattr(s, attr))


# ---------------------------------------------------------------------------
# Bubble
# ---------------------------------------------------------------------------
def test_bubble_reverse_input():
    steps = run_steps("bubble", [4, 3, 2, 1])
    # passes: 3 cmp + 3 swap + 1 sorted, 2+2+1, 1+1+1, then the final step
    assert len(steps) == 16
    assert count(steps, "comparing") == 6
    assert count(steps, "swapping") == 6
    assert [s.sorted_indices for s in steps if s.sorted_indices and not s.is_final] == [(3,), (2,), (1,)]
    assert steps[-1].metrics == {"comparisons": 6, "swaps": 6, "writes": 0}


def test_bubble_sorted_input_still_compares_every_pass():
    steps = run_steps("bubble", [1, 2, 3, 4])
    assert len(steps) == 10
    assert count(steps, "comparing") == 6
    assert count(steps, "swapping") == 0


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------
def test_selection_reverse_input():
    steps = run_steps("selection", [4, 3, 2, 1])
    assert len(steps) == 12
    assert count(steps, "comparing") == 6
    assert [s.swapping for s in steps if s.swapping] == [(0, 3), (1, 2)]
    # every scan step compares against the running minimum
    assert [s.comparing for s in steps[:3]] == [(0, 1), (1, 2), (2, 3)]


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------
def test_insertion_reverse_input():
    steps = run_steps("insertion", [4, 3, 2, 1])
    # per key: pick-up + (compare, shift) per shift + placement, then final
    assert len(steps) == 4 + 6 + 8 + 1
    assert steps[-1].metrics == {"comparisons": 6, "swaps": 0, "writes": 9}


def test_insertion_shift_shows_key_in_the_hole():
    steps = run_steps("insertion", [4, 3])
    pick, cmp, shift, place, final = steps
    assert pick.comparing == (1,)
    assert cmp.comparing == (0, 1)
    assert shift.values == [3, 4]
    assert shift.states == ["default", "default"]
    assert place.values == [3, 4]
    assert final.is_final


def test_insertion_later_shifts_keep_the_key_in_the_hole():
    steps = run_steps("insertion", [4, 3, 2, 1])
    # key 2: compare (1, 2), shift, compare (0, 1), shift, place
    second_compare, second_shift = steps[7], steps[8]
    assert second_compare.comparing == (0, 1)
    assert second_compare.values == [3, 2, 4, 1]
    assert second_shift.values == [2, 3, 4, 1]
    for step in steps:
        assert sorted(step.values) == [1, 2, 3, 4]


def test_insertion_sorted_input_only_picks_and_places():
    steps = run_steps("insertion", [1, 2, 3])
    assert len(steps) == 2 * 2 + 1
    assert steps[-1].metrics["comparisons"] == 0


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------
def test_merge_two_elements():
    compare_step, take_right, drain_left, final = run_steps("merge", [2, 1])
    assert compare_step.comparing == (0,)
    assert compare_step.values == [2, 1]
    assert take_right.values == [1, 2]
    assert drain_left.values == [1, 2]
    assert final.is_final


def test_merge_is_stable():
    values = [3, 1, 3, 1, 2, 3, 2]
    final = run_steps("merge", values)[-1]
    by_value = {}
    for bar in final.bars:
        by_value.setdefault(bar.value, []).append(bar.uid)
    for uids in by_value.values():
        assert uids == sorted(uids)


def test_merge_one_placement_per_element_per_level():
    # n = 4: two merges of 2 plus one merge of 4 → 8 placements
    steps = run_steps("merge", [4, 3, 2, 1])
    assert steps[-1].metrics["writes"] == 8
    assert len(steps) == steps[-1].metrics["comparisons"] + 8 + 1


# ---------------------------------------------------------------------------
# Quick
# ---------------------------------------------------------------------------
def test_quick_first_partition():
    steps = run_steps("quick", [3, 1, 4, 1, 5, 9, 2, 6])
    first_partition = steps[:15]

    assert steps[0].pivot == 7
    assert steps[0].states[7] == "pivot"
    for s in first_partition:
        for idx in s.comparing + s.swapping:
            assert 0 <= idx <= 7

    # Lomuto swaps j into i for every value < 6, including i == j
    assert [s.swapping for s in first_partition if s.swapping][:5] == [
        (0, 0), (1, 1), (2, 2), (3, 3), (4, 4),
    ]

    placed = steps[14]
    assert placed.swapping == (6, 7)
    assert placed.pivot is None
    assert placed.values == [3, 1, 4, 1, 5, 2, 6, 9]
    assert all(v < 6 for v in placed.values[:6])
    assert all(v > 6 for v in placed.values[7:])


def test_quick_pivot_stays_put_during_scan():
    steps = run_steps("quick", [3, 1, 4, 1, 5, 9, 2, 6])
    for s in steps[:14]:
        assert s.values[7] == 6
        assert s.pivot == 7


# ---------------------------------------------------------------------------
# Heap
# ---------------------------------------------------------------------------
def test_heap_reverse_input():
    steps = run_steps("heap", [4, 3, 2, 1])
    assert len(steps) == 11
    # build phase starts at the last non-leaf, left child first
    assert steps[0].comparing == (3, 1)
    assert steps[1].comparing == (1, 0)
    assert steps[2].comparing == (2, 0)
    assert steps[3].swapping == (0, 3)
    assert steps[-1].metrics == {"comparisons": 6, "swaps": 4, "writes": 0}


def test_heap_extracted_slots_render_sorted():
    steps = run_steps("heap", [4, 3, 2, 1])
    assert steps[3].states[3] == "swapping"
    assert steps[4].states[3] == "sorted"


def test_bars_keep_their_uid_through_swaps():
    gen = require_algorithm("selection").fn(bars_from_values([2, 1]))
    steps = list(gen)
    assert [b.uid for b in steps[-1].bars] == [1, 0]
