import random

import pytest

from bars import (
    ArraySource,
    Bar,
    BarState,
    bars_from_values,
    random_bars,
    VALUE_MIN,
    VALUE_MAX,
    DEFAULT_SIZE,
)


def test_default_source_generates_on_construction():
    src = ArraySource()
    assert src.size == DEFAULT_SIZE
    assert len(src.bars) == DEFAULT_SIZE


def test_values_are_in_range_and_plain():
    bars = random_bars(500, random.Random(3))
    assert all(VALUE_MIN <= b.value <= VALUE_MAX for b in bars)
    assert all(b.state is BarState.DEFAULT for b in bars)
    assert [b.uid for b in bars] == list(range(500))


def test_seeded_sources_agree():
    assert ArraySource(20, seed=9).values == ArraySource(20, seed=9).values


def test_generate_with_size_updates_size():
    src = ArraySource(10, seed=1)
    bars = src.generate(25)
    assert src.size == 25
    assert len(bars) == 25
    assert src.set_size(0) == []


def test_generate_returns_a_copy():
    src = ArraySource(10, seed=1)
    bars = src.generate()
    bars.clear()
    assert len(src.bars) == 10


@pytest.mark.parametrize("size", [-1, -50])
def test_negative_size_is_rejected(size):
    with pytest.raises(ValueError):
        ArraySource(size)
    with pytest.raises(ValueError):
        ArraySource(10).generate(size)


def test_bar_helpers():
    bar = Bar(42, BarState.PIVOT, uid=3)
    assert bar.plain() == Bar(42, BarState.DEFAULT, 3)
    assert bar.with_state(BarState.PIVOT) is bar
    assert Bar.from_dict(bar.to_dict()) == bar
    assert bars_from_values([3, 1]) == [Bar(3, BarState.DEFAULT, 0), Bar(1, BarState.DEFAULT, 1)]
