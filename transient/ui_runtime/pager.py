"""Default forward/backward pager event handler."""

from __future__ import annotations

import logging
from collections.abc import Callable

from transient.api.host import SurfacePort, SurfaceViewport
from transient.api.input_events import InputEvent
from transient.api.pager import PagerAction, PagerKeymap
from transient.ui_runtime.keymap import classify_event
from transient.ui_runtime.list_viewport import page_backward, page_forward

_LOG = logging.getLogger("transient.pager")


class DefaultPager:
    """Page one transient surface; quit restores, any other key stops the loop."""

    def __init__(
        self,
        host: SurfacePort,
        surface_id: str,
        *,
        restore: Callable[[], bool],
        keymap: PagerKeymap | None = None,
    ) -> None:
        self._host = host
        self._surface_id = surface_id
        self._restore = restore
        self._keymap = keymap or PagerKeymap()

    @property
    def surface_id(self) -> str:
        return self._surface_id

    def __call__(self, event: InputEvent) -> bool:
        return self.handle(event)

    def handle(self, event: InputEvent) -> bool:
        """Return True to keep the loop running."""
        action = classify_event(event, self._keymap)
        if action is PagerAction.QUIT:
            self._restore()
            return False
        if action is PagerAction.PAGE_FORWARD:
            self._scroll(page_forward)
            return True
        if action is PagerAction.PAGE_BACKWARD:
            self._scroll(page_backward)
            return True
        return False

    def _scroll(self, next_top: Callable[[SurfaceViewport], int]) -> None:
        viewport = self._host.surface_viewport(self._surface_id)
        top_line = next_top(viewport)
        self._host.scroll_surface_to(self._surface_id, top_line)
        self._host.clear_status()
        _LOG.debug("paged %r from line %d to %d", self._surface_id, viewport.top_line, top_line)
