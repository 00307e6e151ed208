"""Line-viewport helpers for paging through a surface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from transient.api.host import SurfaceViewport

T = TypeVar("T")


def visible_slice(items: Sequence[T], scroll: int, visible_count: int) -> list[T]:
    """Return visible window slice for a line viewport."""
    normalized_visible = max(0, visible_count)
    clamped_scroll = clamp_scroll(scroll, normalized_visible, len(items))
    return list(items[clamped_scroll : clamped_scroll + normalized_visible])


def clamp_scroll(scroll: int, visible_count: int, total_count: int) -> int:
    """Clamp scroll offset to valid viewport bounds."""
    normalized_visible = max(0, visible_count)
    max_scroll = max(0, total_count - normalized_visible)
    return max(0, min(scroll, max_scroll))


def is_top_visible(viewport: SurfaceViewport) -> bool:
    return viewport.top_line <= 0


def is_bottom_visible(viewport: SurfaceViewport) -> bool:
    """Return whether the last line is inside the viewport."""
    return viewport.top_line + max(0, viewport.visible_lines) >= viewport.total_lines


def page_forward(viewport: SurfaceViewport) -> int:
    """Return next top line, wrapping to the start once the end is visible."""
    if is_bottom_visible(viewport):
        return 0
    step = max(1, viewport.visible_lines)
    return clamp_scroll(viewport.top_line + step, viewport.visible_lines, viewport.total_lines)


def page_backward(viewport: SurfaceViewport) -> int:
    """Return previous top line, wrapping to the end once the start is visible."""
    if is_top_visible(viewport):
        return clamp_scroll(viewport.total_lines, viewport.visible_lines, viewport.total_lines)
    step = max(1, viewport.visible_lines)
    return clamp_scroll(viewport.top_line - step, viewport.visible_lines, viewport.total_lines)
