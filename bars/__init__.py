"""
bars/
-----
Core data layer.  Public API:

    from bars import Bar, BarState
    from bars import ArraySource, bars_from_values
"""

from bars.bar    import Bar, BarState
from bars.source import (
    ArraySource,
    bars_from_values,
    random_bars,
    VALUE_MIN,
    VALUE_MAX,
    SIZE_MIN,
    SIZE_MAX,
    DEFAULT_SIZE,
)

__all__ = [
    "Bar",          "BarState",
    "ArraySource",  "bars_from_values",  "random_bars",
    "VALUE_MIN",    "VALUE_MAX",
    "SIZE_MIN",     "SIZE_MAX",          "DEFAULT_SIZE",
]
