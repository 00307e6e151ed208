"""Shared runtime exception types and recoverable-error policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class SchedulingFailure(RuntimeError):
    """Host could not register a deferred callback."""


class SurfaceNotFoundError(LookupError):
    """Named surface does not exist on the host."""

    def __init__(self, surface_id: str) -> None:
        super().__init__(f"surface not found: {surface_id!r}")
        self.surface_id = surface_id


# Host failures tolerated on restore and scheduling paths.
RecoverableRuntimeErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_RUNTIME_ERRORS: RecoverableRuntimeErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
    LookupError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated host failure with its traceback."""
    logger.log(level, message, exc_info=True)


__all__ = [
    "RECOVERABLE_RUNTIME_ERRORS",
    "RecoverableRuntimeErrors",
    "SchedulingFailure",
    "SurfaceNotFoundError",
    "log_recoverable",
]
