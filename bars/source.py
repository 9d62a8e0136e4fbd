"""
source.py — Randomized Input Source
====================================
Produces the unsorted arrays the visualizer runs on.

    src = ArraySource(size=50, seed=7)
    bars = src.generate()          # fresh array, all DEFAULT
    src.set_size(80)               # regenerates at the new size

Values are drawn uniformly from [VALUE_MIN, VALUE_MAX] inclusive.  The UI
slider clamps sizes to [SIZE_MIN, SIZE_MAX] but the source itself accepts
any non-negative size.

Whether a regeneration is *allowed* (not while a run is active) is the
controller's call, not ours.
"""

import random
from typing import List, Optional, Sequence

from bars.bar import Bar, BarState


VALUE_MIN    = 10
VALUE_MAX    = 509
SIZE_MIN     = 10
SIZE_MAX     = 100
DEFAULT_SIZE = 50


def bars_from_values(values: Sequence[int]) -> List[Bar]:
    """Wrap plain ints as DEFAULT bars, uid = position."""
    return [Bar(int(v), BarState.DEFAULT, i) for i, v in enumerate(values)]


def random_bars(
    size: int,
    rng: Optional[random.Random] = None,
    low: int = VALUE_MIN,
    high: int = VALUE_MAX,
) -> List[Bar]:
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")
    rng = rng or random.Random()
    return bars_from_values([rng.randint(low, high) for _ in range(size)])


class ArraySource:
    """
    Attributes:
        size : Number of bars the next generate() produces.
        bars : The most recently generated array.
    """

    def __init__(self, size: int = DEFAULT_SIZE, seed: Optional[int] = None):
        if size < 0:
            raise ValueError(f"Array size must be non-negative, got {size}")
        self.size: int        = size
        self._rng             = random.Random(seed)
        self.bars: List[Bar]  = []
        self.generate()

    def generate(self, size: Optional[int] = None) -> List[Bar]:
        if size is not None:
            if size < 0:
                raise ValueError(f"Array size must be non-negative, got {size}")
            self.size = size
        self.bars = random_bars(self.size, self._rng)
        return list(self.bars)

    def set_size(self, size: int) -> List[Bar]:
        return self.generate(size)

    @property
    def values(self) -> List[int]:
        return [b.value for b in self.bars]
