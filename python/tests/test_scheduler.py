"""Scheduler tests."""

from __future__ import annotations

from adventure.backend.engine.scheduler import Scheduler


def test_callbacks_run_in_deadline_order(scheduler: Scheduler, clock) -> None:
    calls: list[str] = []
    scheduler.call_later(0.5, lambda: calls.append("b"))
    scheduler.call_later(0.2, lambda: calls.append("a"))
    scheduler.call_later(1.0, lambda: calls.append("c"))

    clock.now = 0.6
    assert scheduler.run_due() == 2
    assert calls == ["a", "b"]
    clock.now = 2.0
    scheduler.run_due()
    assert calls == ["a", "b", "c"]


def test_nothing_runs_early(scheduler: Scheduler, clock) -> None:
    calls: list[int] = []
    scheduler.call_later(1.0, lambda: calls.append(1))
    clock.now = 0.99
    assert scheduler.run_due() == 0
    assert calls == []


def test_cancelled_timer_never_fires(scheduler: Scheduler, clock) -> None:
    calls: list[int] = []
    timer = scheduler.call_later(0.1, lambda: calls.append(1))
    timer.cancel()
    clock.now = 1.0
    scheduler.run_due()
    assert calls == []
    assert not timer.pending
    assert scheduler.pending == 0


def test_fired_timer_is_not_pending(scheduler: Scheduler, clock) -> None:
    timer = scheduler.call_later(0.0, lambda: None)
    assert timer.pending
    scheduler.run_due()
    assert timer.fired
    assert not timer.pending


def test_clear_cancels_everything(scheduler: Scheduler, clock) -> None:
    calls: list[int] = []
    scheduler.call_later(0.1, lambda: calls.append(1))
    scheduler.call_later(0.2, lambda: calls.append(2))
    scheduler.clear()
    clock.now = 1.0
    scheduler.run_due()
    assert calls == []
