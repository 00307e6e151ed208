"""In-memory text surfaces shared by host backends."""

from __future__ import annotations

import io
from collections.abc import Callable
from contextlib import redirect_stdout
from dataclasses import dataclass, field
from typing import TypeVar

from transient.api.host import SurfaceViewport
from transient.runtime.errors import SurfaceNotFoundError
from transient.ui_runtime.list_viewport import clamp_scroll, visible_slice

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SurfaceLayout:
    """Layout snapshot: shown surfaces bottom-to-top and the focused one."""

    visible: tuple[str, ...]
    focused: str | None


@dataclass(slots=True)
class TextSurface:
    """One named line buffer with a scroll offset."""

    surface_id: str
    lines: list[str] = field(default_factory=list)
    top_line: int = 0
    read_only: bool = False
    modified: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class SurfaceRegistry:
    """Named surfaces, their visibility order and input focus."""

    def __init__(self, *, page_lines: int) -> None:
        if page_lines <= 0:
            raise ValueError("page_lines must be > 0")
        self._page_lines = page_lines
        self._surfaces: dict[str, TextSurface] = {}
        self._visible: list[str] = []
        self._focused: str | None = None
        self.status: str | None = None

    @property
    def page_lines(self) -> int:
        return self._page_lines

    @page_lines.setter
    def page_lines(self, value: int) -> None:
        self._page_lines = max(1, value)

    @property
    def focused(self) -> str | None:
        return self._focused

    @property
    def visible(self) -> tuple[str, ...]:
        return tuple(self._visible)

    def get(self, surface_id: str) -> TextSurface:
        surface = self._surfaces.get(surface_id)
        if surface is None:
            raise SurfaceNotFoundError(surface_id)
        return surface

    def open_base(self, surface_id: str, text: str) -> TextSurface:
        """Create, show and focus a surface owned by the host itself."""
        surface = TextSurface(surface_id=surface_id, lines=text.splitlines())
        self._surfaces[surface_id] = surface
        self.show(surface_id)
        self._focused = surface_id
        return surface

    def show(self, surface_id: str) -> None:
        self.get(surface_id)
        if surface_id in self._visible:
            self._visible.remove(surface_id)
        self._visible.append(surface_id)

    def top_visible(self) -> TextSurface | None:
        if not self._visible:
            return None
        return self._surfaces[self._visible[-1]]

    # LayoutPort ------------------------------------------------------------

    def capture_layout(self) -> SurfaceLayout:
        return SurfaceLayout(visible=tuple(self._visible), focused=self._focused)

    def restore_layout(self, snapshot: SurfaceLayout) -> None:
        self._visible = [sid for sid in snapshot.visible if sid in self._surfaces]
        focused = snapshot.focused
        self._focused = focused if focused in self._surfaces else None

    # SurfacePort -----------------------------------------------------------

    def surface_exists(self, surface_id: str) -> bool:
        return surface_id in self._surfaces

    def is_surface_visible(self, surface_id: str) -> bool:
        return surface_id in self._visible

    def retire_surface(self, surface_id: str) -> None:
        self.get(surface_id)
        if surface_id in self._visible:
            self._visible.remove(surface_id)

    def kill_surface(self, surface_id: str) -> None:
        """Destroy a surface out-of-band."""
        self._surfaces.pop(surface_id, None)
        if surface_id in self._visible:
            self._visible.remove(surface_id)
        if self._focused == surface_id:
            self._focused = self._visible[-1] if self._visible else None

    def render_into(self, surface_id: str, producer: Callable[[], T]) -> T:
        """Capture producer output, then replace and show the surface."""
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            result = producer()
        surface = self._surfaces.get(surface_id)
        if surface is None:
            surface = TextSurface(surface_id=surface_id)
            self._surfaces[surface_id] = surface
        surface.lines = buffer.getvalue().splitlines()
        surface.top_line = 0
        surface.read_only = True
        surface.modified = False
        self.show(surface_id)
        return result

    def surface_viewport(self, surface_id: str) -> SurfaceViewport:
        surface = self.get(surface_id)
        return SurfaceViewport(
            top_line=surface.top_line,
            visible_lines=self._page_lines,
            total_lines=len(surface.lines),
        )

    def scroll_surface_to(self, surface_id: str, top_line: int) -> None:
        surface = self.get(surface_id)
        surface.top_line = clamp_scroll(top_line, self._page_lines, len(surface.lines))

    def visible_lines(self, surface_id: str) -> list[str]:
        surface = self.get(surface_id)
        return visible_slice(surface.lines, surface.top_line, self._page_lines)

    def clear_status(self) -> None:
        self.status = None
