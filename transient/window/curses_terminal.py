"""Curses-backed terminal host."""

from __future__ import annotations

import curses
import logging
from collections import deque
from collections.abc import Callable
from time import monotonic
from typing import TypeVar

from transient.api.host import SurfaceViewport, TimerCallback, TimerHandle
from transient.api.input_events import InputEvent, KeyEvent
from transient.runtime.scheduler import Scheduler
from transient.window.surfaces import SurfaceLayout, SurfaceRegistry

T = TypeVar("T")

_LOG = logging.getLogger("transient.window.curses")
_MIN_PANE_LINES = 3

_SPECIAL_KEYS: dict[int, str] = {
    curses.KEY_BACKSPACE: "backspace",
    127: "backspace",
    8: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
    27: "escape",
    32: "space",
}


def translate_key(code: int) -> KeyEvent:
    """Map a curses key code to a normalized key-down event."""
    name = _SPECIAL_KEYS.get(code)
    if name is not None:
        return KeyEvent(event_type="key_down", value=name)
    if 0 <= code < 256 and chr(code).isprintable():
        return KeyEvent(event_type="key_down", value=chr(code))
    try:
        return KeyEvent(event_type="key_down", value=curses.keyname(code).decode("ascii", "replace"))
    except ValueError:
        return KeyEvent(event_type="key_down", value=f"key_{code}")


class CursesTerminalHost:
    """Terminal host: base surface on top, transient surfaces in a bottom pane.

    Deferred callbacks run between `getch` polls, so a scheduled restore fires
    while the application waits for input.
    """

    def __init__(
        self,
        stdscr: "curses._CursesWindow",
        *,
        base_surface: str = "main",
        poll_ms: int = 50,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._stdscr = stdscr
        self._base_surface = base_surface
        self._clock = clock or monotonic
        self._scheduler = Scheduler(start_seconds=self._clock())
        self._pending_input: deque[InputEvent] = deque()
        self._surfaces = SurfaceRegistry(page_lines=self._pane_body_lines())
        self._surfaces.open_base(base_surface, "")
        self._stdscr.keypad(True)
        self._stdscr.timeout(max(1, poll_ms))
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    @property
    def surfaces(self) -> SurfaceRegistry:
        return self._surfaces

    def set_base_text(self, text: str) -> None:
        self._surfaces.get(self._base_surface).lines = text.splitlines()
        self.redraw()

    def set_status(self, message: str | None) -> None:
        self._surfaces.status = message
        self.redraw()

    def pump(self) -> int:
        """Run deferred callbacks that are due."""
        executed = self._scheduler.run_due(max(self._scheduler.now_seconds, self._clock()))
        if executed:
            self.redraw()
        return executed

    def redraw(self) -> None:
        height, width = self._stdscr.getmaxyx()
        self._stdscr.erase()
        top = self._surfaces.top_visible()
        transient = top if top is not None and top.surface_id != self._base_surface else None
        base_rows = height - 1
        if transient is not None:
            base_rows = max(0, height - 1 - self._pane_lines())
        base = self._surfaces.get(self._base_surface)
        if self._surfaces.is_surface_visible(self._base_surface):
            lines = base.lines[base.top_line : base.top_line + base_rows]
            for row, line in enumerate(lines):
                self._put(row, line, width, curses.A_NORMAL)
        if transient is not None:
            header = f"-- {transient.surface_id} --"
            self._put(base_rows, header.ljust(width), width, curses.A_REVERSE)
            for offset, line in enumerate(self._surfaces.visible_lines(transient.surface_id)):
                self._put(base_rows + 1 + offset, line, width, curses.A_NORMAL)
        if self._surfaces.status:
            self._put(height - 1, self._surfaces.status, width, curses.A_DIM)
        self._stdscr.refresh()

    # LayoutPort ------------------------------------------------------------

    def capture_layout(self) -> SurfaceLayout:
        return self._surfaces.capture_layout()

    def restore_layout(self, snapshot: SurfaceLayout) -> None:
        self._surfaces.restore_layout(snapshot)
        self.redraw()

    # SurfacePort -----------------------------------------------------------

    def surface_exists(self, surface_id: str) -> bool:
        return self._surfaces.surface_exists(surface_id)

    def is_surface_visible(self, surface_id: str) -> bool:
        return self._surfaces.is_surface_visible(surface_id)

    def retire_surface(self, surface_id: str) -> None:
        self._surfaces.retire_surface(surface_id)
        self.redraw()

    def render_into(self, surface_id: str, producer: Callable[[], T]) -> T:
        result = self._surfaces.render_into(surface_id, producer)
        self.redraw()
        return result

    def surface_viewport(self, surface_id: str) -> SurfaceViewport:
        return self._surfaces.surface_viewport(surface_id)

    def scroll_surface_to(self, surface_id: str, top_line: int) -> None:
        self._surfaces.scroll_surface_to(surface_id, top_line)
        self.redraw()

    def clear_status(self) -> None:
        self._surfaces.clear_status()

    # InputPort -------------------------------------------------------------

    def read_next_input_event(self) -> InputEvent:
        if self._pending_input:
            return self._pending_input.popleft()
        self.redraw()
        while True:
            code = self._stdscr.getch()
            if code == -1:
                self.pump()
                continue
            if code == curses.KEY_RESIZE:
                self._surfaces.page_lines = self._pane_body_lines()
                self.redraw()
                continue
            return translate_key(code)

    def push_back_unconsumed_event(self, event: InputEvent) -> None:
        self._pending_input.appendleft(event)

    # SchedulerPort ---------------------------------------------------------

    def schedule_after_delay(self, seconds: float, callback: TimerCallback) -> TimerHandle:
        lag = max(0.0, self._clock() - self._scheduler.now_seconds)
        return self._scheduler.call_later(seconds + lag, callback)

    def cancel(self, handle: TimerHandle) -> None:
        self._scheduler.cancel(handle)

    def _pane_lines(self) -> int:
        height, _ = self._stdscr.getmaxyx()
        return max(_MIN_PANE_LINES, (height - 1) // 2)

    def _pane_body_lines(self) -> int:
        return max(1, self._pane_lines() - 1)

    def _put(self, row: int, text: str, width: int, attrs: int) -> None:
        try:
            self._stdscr.addnstr(row, 0, text, max(0, width - 1), attrs)
        except curses.error:
            _LOG.debug("clipped draw at row %d", row)


def run_terminal(app: Callable[[CursesTerminalHost], int], **host_kwargs: object) -> int:
    """Run `app` with a terminal host inside `curses.wrapper`."""

    def _main(stdscr: "curses._CursesWindow") -> int:
        return app(CursesTerminalHost(stdscr, **host_kwargs))

    return curses.wrapper(_main)
