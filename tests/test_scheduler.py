import threading

from engine import ManualScheduler, ThreadingScheduler


def test_manual_scheduler_fires_in_due_order():
    sched = ManualScheduler()
    fired = []
    sched.call_later(0.3, lambda: fired.append("c"))
    sched.call_later(0.1, lambda: fired.append("a"))
    sched.call_later(0.2, lambda: fired.append("b"))

    assert sched.pending == 3
    assert sched.run_until_idle() == 3
    assert fired == ["a", "b", "c"]
    assert sched.now == 0.3


def test_manual_scheduler_same_instant_keeps_scheduling_order():
    sched = ManualScheduler()
    fired = []
    for name in "xyz":
        sched.call_later(0.5, lambda name=name: fired.append(name))
    sched.advance(1.0)
    assert fired == ["x", "y", "z"]


def test_manual_scheduler_skips_cancelled():
    sched = ManualScheduler()
    fired = []
    handle = sched.call_later(0.1, lambda: fired.append(1))
    handle.cancel()
    handle.cancel()

    assert handle.cancelled
    assert sched.pending == 0
    assert not sched.run_next()
    assert fired == []


def test_manual_scheduler_advance_stops_at_target():
    sched = ManualScheduler()
    fired = []
    sched.call_later(1.0, lambda: fired.append(1))
    assert sched.advance(0.5) == 0
    assert sched.now == 0.5
    assert sched.advance(0.5) == 1


def test_run_until_idle_limit():
    sched = ManualScheduler()

    def rearm():
        sched.call_later(0.1, rearm)

    sched.call_later(0.1, rearm)
    assert sched.run_until_idle(limit=5) == 5
    assert sched.pending == 1


def test_threading_scheduler_fires_and_cancels():
    sched = ThreadingScheduler()
    done  = threading.Event()
    never = threading.Event()

    sched.call_later(0.01, done.set)
    handle = sched.call_later(0.05, never.set)
    handle.cancel()

    assert done.wait(2.0)
    assert not never.wait(0.2)
