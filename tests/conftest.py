import pytest

from bars import bars_from_values
from algorithms import require_algorithm
from engine import ManualScheduler


ALGO_KEYS = ["bubble", "merge", "quick", "insertion", "selection", "heap"]


def run_steps(algo_key, values):
    """Drain one generator over plain ints."""
    return list(require_algorithm(algo_key).fn(bars_from_values(values)))


@pytest.fixture
def scheduler():
    return ManualScheduler()
