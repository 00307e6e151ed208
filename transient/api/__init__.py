"""Public transient display API contracts."""

from transient.api.config import NEVER, AutoRestoreDelay, TransientConfig, TransientLoggingConfig
from transient.api.events import (
    AutoRestoreArmed,
    EventBus,
    LayoutRestored,
    LoopExited,
    Subscription,
    SurfaceDisplayed,
    create_event_bus,
)
from transient.api.host import (
    InputPort,
    LayoutPort,
    LayoutSnapshot,
    SchedulerPort,
    SurfacePort,
    SurfaceViewport,
    TimerHandle,
    TransientHost,
)
from transient.api.input_events import InputEvent, KeyEvent, key_down
from transient.api.pager import EventHandler, PagerAction, PagerKeymap
from transient.api.transient import TransientDisplay, create_transient_display

__all__ = [
    "AutoRestoreArmed",
    "AutoRestoreDelay",
    "EventBus",
    "EventHandler",
    "InputEvent",
    "InputPort",
    "KeyEvent",
    "LayoutPort",
    "LayoutRestored",
    "LayoutSnapshot",
    "LoopExited",
    "NEVER",
    "PagerAction",
    "PagerKeymap",
    "SchedulerPort",
    "Subscription",
    "SurfaceDisplayed",
    "SurfacePort",
    "SurfaceViewport",
    "TimerHandle",
    "TransientConfig",
    "TransientDisplay",
    "TransientHost",
    "TransientLoggingConfig",
    "create_event_bus",
    "create_transient_display",
    "key_down",
]
