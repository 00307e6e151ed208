"""Clock-driven one-shot task scheduler backing host deferred callbacks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from heapq import heappop, heappush

from transient.api.host import TimerCallback, TimerHandle


@dataclass(slots=True)
class _Task:
    handle: TimerHandle
    due_seconds: float
    callback: TimerCallback
    cancelled: bool = False


class Scheduler:
    """Deferred callbacks run only when the owner advances the clock."""

    def __init__(self, *, start_seconds: float = 0.0) -> None:
        self._now_seconds = start_seconds
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        return sum(1 for task in self._tasks.values() if not task.cancelled)

    def call_later(self, delay_seconds: float, callback: TimerCallback) -> TimerHandle:
        """Schedule a one-shot callback after delay.

        A zero delay is still deferred to the next `run_due`/`advance` call.
        """
        if not math.isfinite(delay_seconds) or delay_seconds < 0.0:
            raise ValueError("delay_seconds must be finite and >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        handle = TimerHandle(task_id)
        due_seconds = self._now_seconds + delay_seconds
        self._tasks[task_id] = _Task(handle=handle, due_seconds=due_seconds, callback=callback)
        heappush(self._queue, (due_seconds, task_id))
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        """Cancel a scheduled task if it exists."""
        task = self._tasks.get(handle.id)
        if task is not None:
            task.cancelled = True

    def is_pending(self, handle: TimerHandle) -> bool:
        task = self._tasks.get(handle.id)
        return task is not None and not task.cancelled

    def advance(self, delta_seconds: float) -> int:
        """Advance scheduler clock and run due callbacks."""
        if not math.isfinite(delta_seconds) or delta_seconds < 0.0:
            raise ValueError("delta_seconds must be finite and >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds`.

        Tasks scheduled by those callbacks wait for the next call, even when
        already due.
        """
        if not math.isfinite(now_seconds):
            raise ValueError("now_seconds must be finite")
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        horizon = self._next_task_id
        deferred: list[tuple[float, int]] = []
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            entry = heappop(self._queue)
            if entry[1] >= horizon:
                deferred.append(entry)
                continue
            task = self._tasks.pop(entry[1], None)
            if task is None or task.cancelled:
                continue
            task.callback()
            executed += 1
        for entry in deferred:
            heappush(self._queue, entry)
        return executed
