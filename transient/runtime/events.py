"""In-process lifecycle event bus."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from transient.api.events import Subscription
from transient.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable

TEvent = TypeVar("TEvent")
Observer = Callable[[Any], None]

_LOG = logging.getLogger("transient.events")


@dataclass(frozen=True, slots=True)
class _Entry:
    event_type: type[object]
    observer: Observer


class RuntimeEventBus:
    """Dispatch display lifecycle events to observers in subscription order.

    A failing observer is logged and skipped; it never interrupts a display
    cycle or a restore.
    """

    def __init__(self) -> None:
        self._last_id = 0
        self._entries: dict[int, _Entry] = {}

    @property
    def subscription_count(self) -> int:
        return len(self._entries)

    def subscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> Subscription:
        self._last_id += 1
        self._entries[self._last_id] = _Entry(event_type=event_type, observer=handler)
        return Subscription(self._last_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._entries.pop(subscription.id, None)

    def publish(self, event: object) -> int:
        """Deliver `event` to matching observers; return how many were called."""
        matching = [entry for entry in self._entries.values() if isinstance(event, entry.event_type)]
        for entry in matching:
            try:
                entry.observer(event)
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(
                    _LOG,
                    f"observer for {type(event).__name__} failed",
                    level=logging.WARNING,
                )
        _LOG.debug("published %s to %d observer(s)", type(event).__name__, len(matching))
        return len(matching)


EventBus = RuntimeEventBus
