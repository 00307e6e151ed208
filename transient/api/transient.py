"""Public transient display entry point contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar

from transient.api.config import TransientConfig
from transient.api.events import EventBus
from transient.api.host import TransientHost
from transient.api.pager import EventHandler

if TYPE_CHECKING:
    from transient.runtime.restore_state import RestoreState

T = TypeVar("T")


class TransientDisplay(Protocol):
    """Show generated content transiently and restore the prior layout afterwards."""

    @property
    def state(self) -> "RestoreState":
        """Return the restore state slot."""

    @property
    def is_loop_active(self) -> bool:
        """Return whether an interactive loop is currently running."""

    def display(
        self,
        surface_id: str,
        content_producer: Callable[[], T],
        event_handler: EventHandler | None = None,
    ) -> T:
        """Run one display cycle and return the producer result."""

    def restore(self) -> bool:
        """Restore the saved layout now."""

    def clear(self) -> None:
        """Forget saved state without restoring."""


def create_transient_display(
    host: TransientHost,
    config: TransientConfig | None = None,
    *,
    event_bus: EventBus | None = None,
) -> TransientDisplay:
    """Create default transient display controller bound to one host."""
    from transient.runtime.controller import TransientLoopController

    return TransientLoopController(host, config, event_bus=event_bus)


__all__ = ["TransientDisplay", "create_transient_display"]
