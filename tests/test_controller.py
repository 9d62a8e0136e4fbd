import threading

import pytest

from engine import SortController, StepperState


@pytest.fixture
def flags():
    return []


@pytest.fixture
def ctl(scheduler, flags):
    return SortController(
        scheduler=scheduler,
        size=12,
        seed=5,
        speed=20,
        on_state_change=lambda sorting, paused: flags.append((sorting, paused)),
    )


def test_initial_state(ctl):
    state = ctl.state()
    assert state["algorithm"] == "bubble"
    assert state["status"] == "idle"
    assert state["size"] == 12
    assert len(state["bars"]) == 12
    assert state["step"] is None
    assert not ctl.is_sorting


def test_start_runs_selected_algorithm_on_current_bars(ctl, scheduler):
    original = [b.value for b in ctl.bars]
    assert ctl.set_algorithm("heap")
    assert ctl.start()
    scheduler.run_until_idle()

    assert ctl.stepper.state == StepperState.COMPLETED
    assert [b.value for b in ctl.bars] == sorted(original)
    assert all(b.state.value == "sorted" for b in ctl.bars)
    assert not ctl.is_sorting


def test_start_with_algorithm_argument(ctl):
    assert ctl.start("merge")
    assert ctl.algorithm == "merge"


def test_bars_follow_delivered_steps(ctl, scheduler):
    seen = []
    ctl.on_step = seen.append
    ctl.start()
    scheduler.run_next()
    assert list(seen[-1].bars) == ctl.bars


def test_commands_refused_while_sorting(ctl):
    before = list(ctl.bars)
    ctl.start()
    assert not ctl.start()
    assert not ctl.generate()
    assert not ctl.set_size(30)
    assert not ctl.set_algorithm("quick")
    assert ctl.algorithm == "bubble"

    ctl.pause()
    assert not ctl.generate()
    assert not ctl.set_size(30)
    assert not ctl.set_algorithm("quick")
    assert ctl.source.size == 12
    assert len(ctl.bars) == len(before)


def test_unknown_algorithm_raises(ctl):
    with pytest.raises(ValueError):
        ctl.set_algorithm("bogo")
    with pytest.raises(ValueError):
        ctl.start("bogo")
    with pytest.raises(ValueError):
        SortController(algorithm="bogo")


def test_speed_can_change_any_time(ctl):
    ctl.start()
    ctl.set_speed(80)
    assert ctl.stepper.speed == 80
    ctl.pause()
    ctl.set_speed(5)
    assert ctl.stepper.speed == 5


def test_stop_regenerates_and_silences_the_run(ctl, scheduler):
    seen = []
    ctl.on_step = seen.append
    ctl.start()
    scheduler.run_next()
    assert ctl.stop()

    assert ctl.stepper.state == StepperState.IDLE
    assert ctl.state()["step"] is None
    assert len(ctl.bars) == 12
    assert all(b.state.value == "default" for b in ctl.bars)
    delivered = len(seen)
    scheduler.advance(60)
    assert len(seen) == delivered


def test_stop_when_idle_is_refused(ctl):
    before = list(ctl.bars)
    assert not ctl.stop()
    assert ctl.bars == before


def test_generate_and_resize_when_idle_or_completed(ctl, scheduler):
    assert ctl.set_size(30)
    assert len(ctl.bars) == 30
    ctl.start("quick")
    scheduler.run_until_idle()
    assert ctl.generate()
    assert all(b.state.value == "default" for b in ctl.bars)
    assert ctl.set_algorithm("selection")


def test_state_change_flags(ctl, scheduler, flags):
    ctl.start()
    ctl.pause()
    ctl.resume()
    ctl.stop()
    assert flags == [(True, False), (True, True), (True, False), (False, False)]


def test_state_reports_latest_step(ctl, scheduler):
    ctl.start()
    state = ctl.state()
    assert state["is_sorting"]
    assert state["step"]["step_number"] == 0
    assert state["steps_delivered"] == 1


def test_start_is_refused_while_paused(ctl, scheduler):
    ctl.start()
    scheduler.run_next()
    ctl.pause()
    shown = list(ctl.bars)
    delivered = ctl.stepper.steps_delivered

    assert not ctl.start()
    assert not ctl.start("merge")
    assert ctl.algorithm == "bubble"
    assert ctl.is_paused
    assert ctl.bars == shown
    assert ctl.stepper.steps_delivered == delivered

    assert ctl.resume()
    assert ctl.stepper.steps_delivered == delivered + 1


def test_start_after_stop(ctl):
    ctl.start()
    ctl.pause()
    ctl.stop()
    assert ctl.start("merge")
    assert ctl.stepper.is_running


def test_commands_wait_for_the_stepper_lock(ctl):
    done = threading.Event()

    def resize():
        ctl.set_size(20)
        done.set()

    with ctl.stepper.lock:
        worker = threading.Thread(target=resize, daemon=True)
        worker.start()
        assert not done.wait(timeout=0.1)
        assert len(ctl.bars) == 12

    worker.join(timeout=5.0)
    assert done.is_set()
    assert len(ctl.bars) == 20
