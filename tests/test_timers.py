from __future__ import annotations

from memorymatch.engine.timers import ManualScheduler


def test_calls_fire_in_due_order_once() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(0.3, lambda: fired.append("late"))
    scheduler.call_later(0.1, lambda: fired.append("early"))
    scheduler.call_later(0.1, lambda: fired.append("early-2"))

    assert scheduler.advance(0.05) == 0
    assert scheduler.advance(0.1) == 2
    assert fired == ["early", "early-2"]
    assert scheduler.advance(1.0) == 1
    assert fired == ["early", "early-2", "late"]
    assert scheduler.pending() == 0


def test_cancelled_calls_never_fire() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []
    handle = scheduler.call_later(0.5, lambda: fired.append(1))
    handle.cancel()
    assert scheduler.pending() == 0
    scheduler.advance(1.0)
    assert fired == []


def test_callback_scheduling_a_due_callback_runs_in_same_advance() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []

    def first() -> None:
        fired.append("first")
        scheduler.call_later(0.0, lambda: fired.append("second"))

    scheduler.call_later(0.2, first)
    assert scheduler.advance(0.5) == 2
    assert fired == ["first", "second"]
