"""Public transient display configuration contracts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Final, Literal, TypeAlias

from transient.api.pager import PagerKeymap

NEVER: Final = "never"
AutoRestoreDelay: TypeAlias = float | Literal["never"]


@dataclass(frozen=True, slots=True)
class TransientConfig:
    """Transient display runtime configuration."""

    auto_restore_delay_seconds: AutoRestoreDelay = 1.0
    keymap: PagerKeymap = field(default_factory=PagerKeymap)

    def __post_init__(self) -> None:
        delay = self.auto_restore_delay_seconds
        if delay != NEVER and not (math.isfinite(float(delay)) and float(delay) >= 0.0):
            raise ValueError("auto_restore_delay_seconds must be a finite number >= 0 or 'never'")

    @property
    def auto_restore_enabled(self) -> bool:
        return self.auto_restore_delay_seconds != NEVER


@dataclass(frozen=True, slots=True)
class TransientLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    console_enabled: bool = True
    file_path: str | None = None
    file_format: str = "json"  # text|json


__all__ = ["AutoRestoreDelay", "NEVER", "TransientConfig", "TransientLoggingConfig"]
