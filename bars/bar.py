from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Bar State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class BarState(Enum):
    DEFAULT    = "default"     # blue, nothing happening
    COMPARING  = "comparing"   # yellow, under comparison this step
    SWAPPING   = "swapping"    # red, just exchanged
    PIVOT      = "pivot"       # purple, quicksort partition pivot
    SORTED     = "sorted"      # green, finalized position


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Bar:
    """
    One array element as the visualizer sees it.

    Attributes:
        value : Sort key AND rendered bar height.
        state : Transient highlight.  Never part of the sort key.
        uid   : Creation index assigned by the input source.  Ignored by
                every algorithm; lets tests see where equal values ended up.
    """

    value: int
    state: BarState = BarState.DEFAULT
    uid:   int      = 0

    def with_state(self, state: BarState) -> "Bar":
        if state is self.state:
            return self
        return Bar(self.value, state, self.uid)

    def plain(self) -> "Bar":
        """Same element, highlight cleared."""
        return self.with_state(BarState.DEFAULT)

    def to_dict(self) -> dict:
        return {"value": self.value, "state": self.state.value, "uid": self.uid}

    @classmethod
    def from_dict(cls, d: dict) -> "Bar":
        return cls(
            value=int(d["value"]),
            state=BarState(d.get("state", "default")),
            uid=int(d.get("uid", 0)),
        )

    def __repr__(self) -> str:
        return f"Bar({self.value}, {self.state.value}, uid={self.uid})"
