"""Transient display runtime modules."""

from transient.runtime.auto_restore import AutoRestoreTimer
from transient.runtime.config import (
    load_logging_config,
    load_transient_config,
    parse_auto_restore_delay,
    resolve_log_level_name,
)
from transient.runtime.controller import TransientLoopController
from transient.runtime.errors import SchedulingFailure, SurfaceNotFoundError
from transient.runtime.events import EventBus
from transient.runtime.logging import configure_transient_logging, setup_transient_logging
from transient.runtime.restore_state import LayoutSnapshotStore, RestoreState
from transient.runtime.scheduler import Scheduler

__all__ = [
    "AutoRestoreTimer",
    "EventBus",
    "LayoutSnapshotStore",
    "RestoreState",
    "Scheduler",
    "SchedulingFailure",
    "SurfaceNotFoundError",
    "TransientLoopController",
    "configure_transient_logging",
    "load_logging_config",
    "load_transient_config",
    "parse_auto_restore_delay",
    "resolve_log_level_name",
    "setup_transient_logging",
]
