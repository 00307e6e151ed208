"""Key name normalization and pager event classification."""

from __future__ import annotations

from transient.api.input_events import InputEvent, KeyEvent
from transient.api.pager import PagerAction, PagerKeymap

_KEY_ALIASES = {
    " ": "space",
    "spc": "space",
    "space": "space",
    "backspace": "backspace",
    "bs": "backspace",
    "\b": "backspace",
    "\x7f": "delete",
    "del": "delete",
    "delete": "delete",
    "enter": "enter",
    "return": "enter",
    "\n": "enter",
    "\r": "enter",
    "escape": "escape",
    "esc": "escape",
}


def map_key_name(key_name: str) -> str | None:
    """Normalize backend key names to pager key identifiers."""
    if key_name in _KEY_ALIASES:
        return _KEY_ALIASES[key_name]
    normalized = key_name.strip().lower()
    if normalized in _KEY_ALIASES:
        return _KEY_ALIASES[normalized]
    if len(normalized) == 1 and normalized.isprintable():
        return normalized
    if normalized.startswith("f") and normalized[1:].isdigit():
        return normalized
    return None


def classify_event(event: InputEvent, keymap: PagerKeymap) -> PagerAction:
    """Classify one host input event into a pager action."""
    if not isinstance(event, KeyEvent) or event.event_type != "key_down":
        return PagerAction.OTHER
    mapped = map_key_name(event.value)
    if mapped is None:
        return PagerAction.OTHER
    return keymap.action_for(mapped)


def normalize_key_names(names: tuple[str, ...]) -> tuple[str, ...]:
    """Normalize configured key names, rejecting unknown ones."""
    normalized: list[str] = []
    for name in names:
        mapped = map_key_name(name)
        if mapped is None:
            raise ValueError(f"unknown key name: {name!r}")
        normalized.append(mapped)
    return tuple(normalized)
