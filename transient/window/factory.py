"""Host backend selection and factory helpers."""

from __future__ import annotations

from typing import Any

from transient.api.host import TransientHost
from transient.runtime.config import normalize_host_backend, resolve_host_backend
from transient.window.headless import HeadlessHost


def create_host(backend: str | None = None, **kwargs: Any) -> TransientHost:
    """Create a host backend by name, defaulting to `TRANSIENT_HOST_BACKEND`."""
    name = resolve_host_backend() if backend is None else normalize_host_backend(backend)
    if name == "headless":
        return HeadlessHost(**kwargs)
    if name == "curses":
        stdscr = kwargs.pop("stdscr", None)
        if stdscr is None:
            raise RuntimeError(
                "curses host needs an initialized screen: pass stdscr=... "
                "or use transient.window.curses_terminal.run_terminal()"
            )
        from transient.window.curses_terminal import CursesTerminalHost

        return CursesTerminalHost(stdscr, **kwargs)
    raise RuntimeError(f"Unsupported TRANSIENT_HOST_BACKEND: {name!r}")


__all__ = ["create_host"]
