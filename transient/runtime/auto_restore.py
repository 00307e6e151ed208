"""Single-slot deferred layout restore."""

from __future__ import annotations

import logging
import math

from transient.api.config import NEVER, AutoRestoreDelay
from transient.api.events import AutoRestoreArmed, EventBus
from transient.api.host import SchedulerPort, TimerHandle
from transient.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from transient.runtime.restore_state import LayoutSnapshotStore

_LOG = logging.getLogger("transient.auto_restore")


class AutoRestoreTimer:
    """Owns the one pending auto-restore callback of a restore state slot."""

    def __init__(
        self,
        scheduler: SchedulerPort,
        store: LayoutSnapshotStore,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._store = store
        self._event_bus = event_bus

    @property
    def pending_timer(self) -> TimerHandle | None:
        return self._store.state.pending_timer

    @property
    def is_pending(self) -> bool:
        return self._store.state.pending_timer is not None

    def cancel_if_pending(self) -> None:
        """Cancel the pending restore, if any."""
        state = self._store.state
        handle = state.pending_timer
        if handle is None:
            return
        state.pending_timer = None
        self._scheduler.cancel(handle)
        _LOG.debug("auto-restore timer %d canceled", handle.id)

    def arm(self, delay_seconds: AutoRestoreDelay) -> None:
        """Replace any pending restore with one firing after `delay_seconds`."""
        self.cancel_if_pending()
        if delay_seconds == NEVER:
            return
        delay = float(delay_seconds)
        if not math.isfinite(delay) or delay < 0.0:
            raise ValueError("delay_seconds must be finite and >= 0")
        if not self._store.has_saved_layout:
            return
        state = self._store.state
        slot: list[TimerHandle] = []

        def _fire() -> None:
            # A handle no longer in the slot was superseded.
            if not slot or state.pending_timer != slot[0]:
                return
            _LOG.debug("auto-restore timer %d fired", slot[0].id)
            self._store.restore()
            if state.pending_timer == slot[0]:
                state.pending_timer = None

        try:
            handle = self._scheduler.schedule_after_delay(delay, _fire)
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(
                _LOG,
                "auto-restore could not be scheduled; layout stays until next restore",
                level=logging.WARNING,
            )
            return
        slot.append(handle)
        state.pending_timer = handle
        _LOG.debug("auto-restore timer %d armed for %.3fs", handle.id, delay)
        if self._event_bus is not None:
            self._event_bus.publish(AutoRestoreArmed(surface_id=state.surface_id, delay_seconds=delay))
