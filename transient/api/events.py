"""Public lifecycle events and event bus contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, Protocol, TypeVar

TEvent = TypeVar("TEvent")
LoopExitReason = Literal["handler_stop", "surface_gone"]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


@dataclass(frozen=True, slots=True)
class SurfaceDisplayed:
    """A transient surface was populated and shown."""

    surface_id: str


@dataclass(frozen=True, slots=True)
class LoopExited:
    """The interactive loop of one display cycle returned control."""

    surface_id: str
    reason: LoopExitReason
    reinjected: bool


@dataclass(frozen=True, slots=True)
class AutoRestoreArmed:
    """A deferred layout restore was scheduled."""

    surface_id: str | None
    delay_seconds: float


@dataclass(frozen=True, slots=True)
class LayoutRestored:
    """The saved layout was consumed, with or without a live surface."""

    surface_id: str | None
    restored: bool


class EventBus(Protocol):
    """Public in-process pub/sub contract."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event and return invocation count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from transient.runtime.events import RuntimeEventBus

    return RuntimeEventBus()


__all__ = [
    "AutoRestoreArmed",
    "EventBus",
    "LayoutRestored",
    "LoopExitReason",
    "LoopExited",
    "Subscription",
    "SurfaceDisplayed",
    "create_event_bus",
]
