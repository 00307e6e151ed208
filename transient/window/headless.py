"""Headless in-memory host with scripted input and a manual clock."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable
from typing import TypeVar

from transient.api.host import SurfaceViewport, TimerCallback, TimerHandle
from transient.api.input_events import InputEvent, key_down
from transient.runtime.scheduler import Scheduler
from transient.window.surfaces import SurfaceLayout, SurfaceRegistry, TextSurface

T = TypeVar("T")

_LOG = logging.getLogger("transient.window.headless")


class HeadlessHost:
    """Full transient host without a screen.

    Input comes from `feed`; time only moves when `advance` is called, which
    runs due deferred callbacks.
    """

    def __init__(self, *, page_lines: int = 10, base_surface: str | None = "main") -> None:
        self._surfaces = SurfaceRegistry(page_lines=page_lines)
        self._scheduler = Scheduler()
        self._pending_input: deque[InputEvent] = deque()
        self.pushed_back: list[InputEvent] = []
        self.layout_restores = 0
        if base_surface is not None:
            self._surfaces.open_base(base_surface, "")

    @property
    def surfaces(self) -> SurfaceRegistry:
        return self._surfaces

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def pending_input(self) -> tuple[InputEvent, ...]:
        return tuple(self._pending_input)

    def feed(self, *events: InputEvent) -> None:
        """Append events to the input script."""
        self._pending_input.extend(events)

    def feed_keys(self, keys: Iterable[str]) -> None:
        self.feed(*(key_down(key) for key in keys))

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run due callbacks."""
        return self._scheduler.advance(seconds)

    def surface(self, surface_id: str) -> TextSurface:
        return self._surfaces.get(surface_id)

    def kill_surface(self, surface_id: str) -> None:
        self._surfaces.kill_surface(surface_id)

    # LayoutPort ------------------------------------------------------------

    def capture_layout(self) -> SurfaceLayout:
        return self._surfaces.capture_layout()

    def restore_layout(self, snapshot: SurfaceLayout) -> None:
        self.layout_restores += 1
        self._surfaces.restore_layout(snapshot)

    # SurfacePort -----------------------------------------------------------

    def surface_exists(self, surface_id: str) -> bool:
        return self._surfaces.surface_exists(surface_id)

    def is_surface_visible(self, surface_id: str) -> bool:
        return self._surfaces.is_surface_visible(surface_id)

    def retire_surface(self, surface_id: str) -> None:
        self._surfaces.retire_surface(surface_id)

    def render_into(self, surface_id: str, producer: Callable[[], T]) -> T:
        return self._surfaces.render_into(surface_id, producer)

    def surface_viewport(self, surface_id: str) -> SurfaceViewport:
        return self._surfaces.surface_viewport(surface_id)

    def scroll_surface_to(self, surface_id: str, top_line: int) -> None:
        self._surfaces.scroll_surface_to(surface_id, top_line)

    def clear_status(self) -> None:
        self._surfaces.clear_status()

    # InputPort -------------------------------------------------------------

    def read_next_input_event(self) -> InputEvent:
        if not self._pending_input:
            raise RuntimeError("headless input script exhausted")
        return self._pending_input.popleft()

    def push_back_unconsumed_event(self, event: InputEvent) -> None:
        self.pushed_back.append(event)
        self._pending_input.appendleft(event)

    # SchedulerPort ---------------------------------------------------------

    def schedule_after_delay(self, seconds: float, callback: TimerCallback) -> TimerHandle:
        handle = self._scheduler.call_later(seconds, callback)
        _LOG.debug("scheduled timer %d at +%.3fs", handle.id, seconds)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        self._scheduler.cancel(handle)
