"""Single-slot saved layout store for transient display cycles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from transient.api.events import EventBus, LayoutRestored
from transient.api.host import LayoutPort, LayoutSnapshot, SurfacePort, TimerHandle
from transient.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable

_LOG = logging.getLogger("transient.restore")


class RestoreHost(LayoutPort, SurfacePort, Protocol):
    """Host ports needed to put a saved layout back."""


@dataclass(slots=True)
class RestoreState:
    """Mutable restore slot shared by one transient display channel.

    `saved_layout` holds the first layout captured since the last restore or
    clear. `surface_id` always names the most recently displayed surface.
    `pending_timer` is the one armed auto-restore callback, if any.
    """

    saved_layout: LayoutSnapshot | None = None
    surface_id: str | None = None
    pending_timer: TimerHandle | None = None

    @property
    def is_empty(self) -> bool:
        return self.saved_layout is None and self.surface_id is None and self.pending_timer is None


class LayoutSnapshotStore:
    """Capture, restore and forget the layout a transient surface replaced."""

    def __init__(
        self,
        host: RestoreHost,
        state: RestoreState | None = None,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self._host = host
        self._state = state if state is not None else RestoreState()
        self._event_bus = event_bus

    @property
    def state(self) -> RestoreState:
        return self._state

    @property
    def has_saved_layout(self) -> bool:
        return self._state.saved_layout is not None

    def capture(self, layout: LayoutSnapshot) -> None:
        """Store layout unless an earlier one is still waiting to be restored."""
        if self._state.saved_layout is not None:
            _LOG.debug("layout already saved; keeping first capture")
            return
        self._state.saved_layout = layout

    def set_surface(self, surface_id: str) -> None:
        """Record the surface of the most recent display cycle."""
        self._state.surface_id = surface_id

    def restore(self) -> bool:
        """Retire the transient surface and restore the saved layout.

        Returns whether the host layout was actually restored. The saved layout
        and surface id are cleared in every case.
        """
        layout = self._state.saved_layout
        surface_id = self._state.surface_id
        self._state.saved_layout = None
        self._state.surface_id = None
        if layout is None:
            return False
        restored = False
        if surface_id is not None and self._surface_is_live(surface_id):
            try:
                self._host.retire_surface(surface_id)
                self._host.restore_layout(layout)
                restored = True
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(
                    _LOG,
                    f"layout restore failed for surface {surface_id!r}",
                    level=logging.WARNING,
                )
        else:
            _LOG.debug("restore target %r missing; dropping saved layout", surface_id)
        if self._event_bus is not None:
            self._event_bus.publish(LayoutRestored(surface_id=surface_id, restored=restored))
        return restored

    def clear(self) -> None:
        """Forget all restore state without touching the host."""
        self._state.saved_layout = None
        self._state.surface_id = None
        self._state.pending_timer = None

    def _surface_is_live(self, surface_id: str) -> bool:
        return self._host.surface_exists(surface_id) and self._host.is_surface_visible(surface_id)
