from __future__ import annotations

import pytest

from transient.api.config import TransientConfig
from transient.api.host import TimerCallback, TimerHandle
from transient.runtime.controller import TransientLoopController
from transient.runtime.errors import SchedulingFailure
from transient.runtime.events import EventBus
from transient.window.headless import HeadlessHost


class RecordingBus(EventBus):
    def __init__(self) -> None:
        super().__init__()
        self.events: list[object] = []
        self.subscribe(object, self.events.append)

    def of_type(self, event_type: type) -> list[object]:
        return [event for event in self.events if isinstance(event, event_type)]


class FailingSchedulerHost(HeadlessHost):
    def schedule_after_delay(self, seconds: float, callback: TimerCallback) -> TimerHandle:
        raise SchedulingFailure("timer table full")


class ExplodingRestoreHost(HeadlessHost):
    def restore_layout(self, snapshot) -> None:
        raise RuntimeError("window configuration rejected")


class CancelRecordingHost(HeadlessHost):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.canceled: list[TimerHandle] = []

    def cancel(self, handle: TimerHandle) -> None:
        self.canceled.append(handle)
        super().cancel(handle)


def lines_of(count: int) -> str:
    return "\n".join(f"line {index}" for index in range(count))


@pytest.fixture
def host() -> HeadlessHost:
    return HeadlessHost(page_lines=3)


@pytest.fixture
def bus() -> RecordingBus:
    return RecordingBus()


@pytest.fixture
def controller(host: HeadlessHost, bus: RecordingBus) -> TransientLoopController:
    return TransientLoopController(host, TransientConfig(auto_restore_delay_seconds=1.0), event_bus=bus)
