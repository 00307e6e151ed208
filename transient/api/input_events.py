"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event."""

    event_type: str
    value: str


def key_down(value: str) -> KeyEvent:
    """Build a key-down event for one backend key name."""
    return KeyEvent(event_type="key_down", value=value)


# Hosts may deliver anything they read; only KeyEvent is classified by the pager.
InputEvent: TypeAlias = object


__all__ = ["InputEvent", "KeyEvent", "key_down"]
