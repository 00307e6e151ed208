"""Host environment port contracts consumed by the transient display runtime."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from transient.api.input_events import InputEvent

T = TypeVar("T")
TimerCallback = Callable[[], None]


class LayoutSnapshot(Protocol):
    """Opaque host layout payload boundary contract."""


@dataclass(frozen=True, slots=True)
class TimerHandle:
    """Opaque handle for one scheduled deferred callback."""

    id: int


@dataclass(frozen=True, slots=True)
class SurfaceViewport:
    """Scroll position of a surface in whole lines."""

    top_line: int
    visible_lines: int
    total_lines: int


class LayoutPort(Protocol):
    """Capture and restore of the host's visual arrangement."""

    def capture_layout(self) -> LayoutSnapshot:
        """Return a snapshot sufficient to restore the current arrangement."""

    def restore_layout(self, snapshot: LayoutSnapshot) -> None:
        """Restore a previously captured arrangement."""


class SurfacePort(Protocol):
    """Named display surfaces owned by the host renderer."""

    def surface_exists(self, surface_id: str) -> bool:
        """Return whether the surface is alive."""

    def is_surface_visible(self, surface_id: str) -> bool:
        """Return whether the surface is currently shown."""

    def retire_surface(self, surface_id: str) -> None:
        """Hide the surface without destroying it."""

    def render_into(self, surface_id: str, producer: Callable[[], T]) -> T:
        """Run producer into a fresh read-only surface and show it without focus."""

    def surface_viewport(self, surface_id: str) -> SurfaceViewport:
        """Return the scroll position of a live surface."""

    def scroll_surface_to(self, surface_id: str, top_line: int) -> None:
        """Scroll a surface without moving input focus."""

    def clear_status(self) -> None:
        """Clear any status/echo-area message."""


class InputPort(Protocol):
    """Blocking input stream with push-back."""

    def read_next_input_event(self) -> InputEvent:
        """Block until the next input event is available."""

    def push_back_unconsumed_event(self, event: InputEvent) -> None:
        """Queue an event so the next reader receives it first."""


class SchedulerPort(Protocol):
    """One-shot deferred callbacks."""

    def schedule_after_delay(self, seconds: float, callback: TimerCallback) -> TimerHandle:
        """Schedule callback after delay and return its handle."""

    def cancel(self, handle: TimerHandle) -> None:
        """Cancel a scheduled callback if it has not fired."""


class TransientHost(LayoutPort, SurfacePort, InputPort, SchedulerPort, Protocol):
    """Full host surface required by the transient display runtime."""


__all__ = [
    "InputPort",
    "LayoutPort",
    "LayoutSnapshot",
    "SchedulerPort",
    "SurfacePort",
    "SurfaceViewport",
    "TimerCallback",
    "TimerHandle",
    "TransientHost",
]
