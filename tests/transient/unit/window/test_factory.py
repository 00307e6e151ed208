from __future__ import annotations

import pytest

from transient.window.factory import create_host
from transient.window.headless import HeadlessHost


def test_create_host_defaults_to_headless(monkeypatch) -> None:
    monkeypatch.delenv("TRANSIENT_HOST_BACKEND", raising=False)
    host = create_host(page_lines=5)
    assert isinstance(host, HeadlessHost)
    assert host.surfaces.page_lines == 5


def test_create_host_reads_backend_env(monkeypatch) -> None:
    monkeypatch.setenv("TRANSIENT_HOST_BACKEND", "memory")
    assert isinstance(create_host(), HeadlessHost)


def test_create_host_curses_requires_screen() -> None:
    with pytest.raises(RuntimeError, match="stdscr"):
        create_host("curses")


def test_create_host_rejects_unknown_backend() -> None:
    with pytest.raises(RuntimeError, match="Unsupported TRANSIENT_HOST_BACKEND"):
        create_host("wayland")


def test_create_host_normalizes_explicit_aliases() -> None:
    assert isinstance(create_host(" Memory "), HeadlessHost)
    with pytest.raises(RuntimeError, match="stdscr"):
        create_host("terminal")
