"""Transient display configuration sourced from environment."""

from __future__ import annotations

import math
import os

from transient.api.config import NEVER, AutoRestoreDelay, TransientConfig, TransientLoggingConfig
from transient.api.pager import PagerKeymap
from transient.ui_runtime.keymap import normalize_key_names

_DEFAULT_DELAY_SECONDS = 1.0


def _csv(name: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return ()
    values = [part.strip() for part in raw.split(",")]
    return tuple(value for value in values if value)


def _keys(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    values = _csv(name)
    if not values:
        return default
    try:
        return normalize_key_names(values)
    except ValueError:
        return default


def parse_auto_restore_delay(raw: str) -> AutoRestoreDelay:
    """Parse seconds or `never`; raise ValueError on anything else."""
    value = raw.strip().lower()
    if value == NEVER:
        return NEVER
    seconds = float(value)
    if not math.isfinite(seconds) or seconds < 0.0:
        raise ValueError(f"auto-restore delay must be >= 0 or 'never': {raw!r}")
    return seconds


def resolve_auto_restore_delay(default: AutoRestoreDelay = _DEFAULT_DELAY_SECONDS) -> AutoRestoreDelay:
    raw = os.getenv("TRANSIENT_AUTO_RESTORE_DELAY")
    if raw is None:
        return default
    try:
        return parse_auto_restore_delay(raw)
    except ValueError:
        return default


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("TRANSIENT_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_pager_keymap() -> PagerKeymap:
    defaults = PagerKeymap()
    return PagerKeymap(
        quit_keys=_keys("TRANSIENT_PAGER_QUIT_KEYS", defaults.quit_keys),
        forward_keys=_keys("TRANSIENT_PAGER_FORWARD_KEYS", defaults.forward_keys),
        backward_keys=_keys("TRANSIENT_PAGER_BACKWARD_KEYS", defaults.backward_keys),
    )


def load_transient_config() -> TransientConfig:
    """Load immutable display configuration from env vars."""
    return TransientConfig(
        auto_restore_delay_seconds=resolve_auto_restore_delay(),
        keymap=load_pager_keymap(),
    )


def load_logging_config() -> TransientLoggingConfig:
    """Load logging pipeline configuration from env vars."""
    file_path = os.getenv("TRANSIENT_LOG_FILE", "").strip() or None
    file_format = os.getenv("TRANSIENT_LOG_FORMAT", "json").strip().lower()
    return TransientLoggingConfig(
        level_name=resolve_log_level_name(),
        console_format="text",
        file_path=file_path,
        file_format=file_format if file_format in {"text", "json"} else "json",
    )


def normalize_host_backend(name: str) -> str:
    """Map backend aliases to `curses` or `headless`; unknown names pass through."""
    value = name.strip().lower()
    if value in {"curses", "terminal", "tty"}:
        return "curses"
    if value in {"headless", "memory", "null"}:
        return "headless"
    return value


def resolve_host_backend(default: str = "headless") -> str:
    return normalize_host_backend(os.getenv("TRANSIENT_HOST_BACKEND", default))
