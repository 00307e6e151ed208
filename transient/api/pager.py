"""Public pager policy contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from transient.api.input_events import InputEvent

EventHandler = Callable[[InputEvent], bool]


class PagerAction(Enum):
    """Classified meaning of one input event for the default pager."""

    QUIT = "quit"
    PAGE_FORWARD = "page_forward"
    PAGE_BACKWARD = "page_backward"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PagerKeymap:
    """Normalized key names bound to pager actions."""

    quit_keys: tuple[str, ...] = ("q",)
    forward_keys: tuple[str, ...] = ("space",)
    backward_keys: tuple[str, ...] = ("backspace", "delete")

    def action_for(self, key_name: str) -> PagerAction:
        """Return bound action for one normalized key name."""
        if key_name in self.quit_keys:
            return PagerAction.QUIT
        if key_name in self.forward_keys:
            return PagerAction.PAGE_FORWARD
        if key_name in self.backward_keys:
            return PagerAction.PAGE_BACKWARD
        return PagerAction.OTHER


__all__ = ["EventHandler", "PagerAction", "PagerKeymap"]
