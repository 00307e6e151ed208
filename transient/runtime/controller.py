"""Transient display cycle orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from transient.api.config import TransientConfig
from transient.api.events import EventBus, LoopExited, LoopExitReason, SurfaceDisplayed
from transient.api.host import TransientHost
from transient.api.pager import EventHandler
from transient.runtime.auto_restore import AutoRestoreTimer
from transient.runtime.restore_state import LayoutSnapshotStore, RestoreState
from transient.ui_runtime.pager import DefaultPager

T = TypeVar("T")

_LOG = logging.getLogger("transient.controller")


class TransientLoopController:
    """Show content in a transient surface, page it, then restore the old layout.

    One controller owns one restore state slot. A cycle is:

    1. cancel any pending auto-restore,
    2. capture the current layout (kept only if no earlier capture is pending),
    3. render the surface through the host,
    4. feed input events to the handler until it returns False or the surface
       disappears; the stopping event is pushed back to the host,
    5. arm the auto-restore timer once no enclosing loop is running.

    Handlers may call `display` again from inside the loop. The first layout
    captured wins, so the eventual restore returns to the arrangement that
    existed before the outermost call.
    """

    def __init__(
        self,
        host: TransientHost,
        config: TransientConfig | None = None,
        *,
        state: RestoreState | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._host = host
        self._config = config or TransientConfig()
        self._event_bus = event_bus
        self._store = LayoutSnapshotStore(host, state, event_bus=event_bus)
        self._timer = AutoRestoreTimer(host, self._store, event_bus=event_bus)
        self._loop_depth = 0

    @property
    def config(self) -> TransientConfig:
        return self._config

    @property
    def state(self) -> RestoreState:
        return self._store.state

    @property
    def store(self) -> LayoutSnapshotStore:
        return self._store

    @property
    def timer(self) -> AutoRestoreTimer:
        return self._timer

    @property
    def is_loop_active(self) -> bool:
        return self._loop_depth > 0

    def display(
        self,
        surface_id: str,
        content_producer: Callable[[], T],
        event_handler: EventHandler | None = None,
    ) -> T:
        """Run one display cycle and return what `content_producer` returned."""
        if not surface_id:
            raise ValueError("surface_id must not be empty")
        superseded_timer = self._timer.is_pending
        self._timer.cancel_if_pending()
        layout = None if self._store.has_saved_layout else self._host.capture_layout()
        try:
            result = self._host.render_into(surface_id, content_producer)
        except Exception:
            if superseded_timer:
                self._arm_auto_restore()
            raise
        if layout is not None:
            self._store.capture(layout)
        self._store.set_surface(surface_id)
        _LOG.debug("displayed surface %r", surface_id)
        self._publish(SurfaceDisplayed(surface_id=surface_id))

        handler = event_handler or self.default_pager(surface_id)
        try:
            self._run_loop(surface_id, handler)
        finally:
            # Also armed when the handler or host input raised.
            if self._loop_depth == 0:
                self._arm_auto_restore()
        return result

    def default_pager(self, surface_id: str) -> DefaultPager:
        """Build the pager used when `display` gets no handler."""
        return DefaultPager(
            self._host,
            surface_id,
            restore=self.restore,
            keymap=self._config.keymap,
        )

    def restore(self) -> bool:
        """Restore the saved layout now, bypassing any pending timer."""
        self._timer.cancel_if_pending()
        restored = self._store.restore()
        self._store.clear()
        return restored

    def clear(self) -> None:
        """Forget saved state without restoring."""
        self._timer.cancel_if_pending()
        self._store.clear()

    def _run_loop(self, surface_id: str, handler: EventHandler) -> None:
        reason: LoopExitReason = "surface_gone"
        reinjected = False
        self._loop_depth += 1
        try:
            while self._host.surface_exists(surface_id):
                event = self._host.read_next_input_event()
                if handler(event):
                    continue
                self._host.push_back_unconsumed_event(event)
                reason = "handler_stop"
                reinjected = True
                break
        finally:
            self._loop_depth -= 1
        _LOG.debug("loop for %r exited: %s", surface_id, reason)
        self._publish(LoopExited(surface_id=surface_id, reason=reason, reinjected=reinjected))

    def _arm_auto_restore(self) -> None:
        if not self._config.auto_restore_enabled or not self._store.has_saved_layout:
            return
        self._timer.arm(self._config.auto_restore_delay_seconds)

    def _publish(self, event: object) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
