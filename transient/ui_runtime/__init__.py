"""Pager policy helpers for transient surfaces."""

from transient.ui_runtime.keymap import classify_event, map_key_name, normalize_key_names
from transient.ui_runtime.list_viewport import (
    clamp_scroll,
    is_bottom_visible,
    is_top_visible,
    page_backward,
    page_forward,
    visible_slice,
)
from transient.ui_runtime.pager import DefaultPager

__all__ = [
    "DefaultPager",
    "clamp_scroll",
    "classify_event",
    "is_bottom_visible",
    "is_top_visible",
    "map_key_name",
    "normalize_key_names",
    "page_backward",
    "page_forward",
    "visible_slice",
]
