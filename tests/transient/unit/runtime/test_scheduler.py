from __future__ import annotations

import pytest

from transient.runtime.scheduler import Scheduler


def test_scheduler_call_later_runs_when_due() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.2, lambda: calls.append("once"))

    assert scheduler.advance(0.1) == 0
    assert calls == []
    assert scheduler.advance(0.1) == 1
    assert calls == ["once"]


def test_scheduler_zero_delay_waits_for_next_advance() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.0, lambda: calls.append("soon"))

    assert calls == []
    assert scheduler.advance(0.0) == 1
    assert calls == ["soon"]


def test_scheduler_cancel_prevents_execution() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    handle = scheduler.call_later(0.1, lambda: calls.append("never"))
    scheduler.cancel(handle)

    assert not scheduler.is_pending(handle)
    assert scheduler.advance(0.2) == 0
    assert calls == []


def test_scheduler_handles_are_unique_and_one_shot() -> None:
    scheduler = Scheduler()
    first = scheduler.call_later(0.1, lambda: None)
    second = scheduler.call_later(0.1, lambda: None)
    assert first != second
    assert scheduler.queued_task_count == 2

    scheduler.advance(0.1)

    assert scheduler.queued_task_count == 0
    assert not scheduler.is_pending(first)


def test_scheduler_runs_in_due_order() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(0.3, lambda: calls.append("late"))
    scheduler.call_later(0.1, lambda: calls.append("early"))

    scheduler.advance(1.0)

    assert calls == ["early", "late"]


def test_scheduler_validates_time_arguments() -> None:
    scheduler = Scheduler(start_seconds=5.0)
    with pytest.raises(ValueError):
        scheduler.call_later(-0.1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-0.1)
    with pytest.raises(ValueError):
        scheduler.run_due(4.0)


def test_scheduler_defers_tasks_added_by_running_callbacks() -> None:
    scheduler = Scheduler()
    calls: list[str] = []

    def _outer() -> None:
        calls.append("outer")
        scheduler.call_later(0.0, lambda: calls.append("inner"))

    scheduler.call_later(0.0, _outer)

    assert scheduler.advance(0.0) == 1
    assert calls == ["outer"]
    assert scheduler.advance(0.0) == 1
    assert calls == ["outer", "inner"]


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_scheduler_rejects_non_finite_times(value: float) -> None:
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(value, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(value)
    with pytest.raises(ValueError):
        scheduler.run_due(value)
    assert scheduler.queued_task_count == 0
