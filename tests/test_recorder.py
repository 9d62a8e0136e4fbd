import pytest

from bars import bars_from_values
from engine import Recorder, compare

from conftest import ALGO_KEYS


REVERSED = bars_from_values([4, 3, 2, 1])


def record(algo_key, bars=REVERSED):
    rec = Recorder()
    rec.start(algo_key, bars)
    rec.run_to_completion()
    return rec


def test_metrics_for_bubble():
    m = record("bubble").get_metrics()
    assert m.algo_key == "bubble"
    assert m.algo_label == "Bubble Sort"
    assert m.array_size == 4
    assert m.total_steps == 16
    assert m.comparisons == 6
    assert m.swaps == 6
    assert m.writes == 0
    assert m.sorted_ok
    assert m.memory_bytes > 0


@pytest.mark.parametrize("algo_key", ALGO_KEYS)
def test_every_algorithm_records_a_sorted_run(algo_key):
    m = record(algo_key, bars_from_values([9, 3, 7, 3, 1, 8])).metrics
    assert m.sorted_ok
    assert m.total_steps > 1


def test_empty_array():
    m = record("merge", []).metrics
    assert m.total_steps == 1
    assert m.sorted_ok


def test_run_before_start_is_an_error():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_unknown_algorithm():
    with pytest.raises(ValueError):
        Recorder().start("bogo", REVERSED)


def test_compare_picks_winners():
    result = compare(record("bubble"), record("selection"))
    assert result.left.total_steps == 16
    assert result.right.total_steps == 12
    assert result.winner_steps == "Selection Sort"
    assert result.winner_comparisons == "tie"
    assert result.winner_swaps == "Selection Sort"


def test_export_is_json_friendly():
    dump = record("insertion").export()
    assert dump["algo_key"] == "insertion"
    assert dump["input"] == [4, 3, 2, 1]
    assert dump["metrics"]["total_steps"] == len(dump["steps"]) == 19
    assert dump["steps"][-1]["is_final"] is True
    assert dump["steps"][0]["bars"][1] == {"value": 3, "state": "comparing", "uid": 1}
