from __future__ import annotations

import pytest

from transient.api import (
    NEVER,
    PagerAction,
    PagerKeymap,
    TransientConfig,
    create_event_bus,
    create_transient_display,
    key_down,
)
from transient.runtime.controller import TransientLoopController
from transient.window.headless import HeadlessHost


def test_transient_config_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        TransientConfig(auto_restore_delay_seconds=-0.5)


def test_transient_config_auto_restore_enabled() -> None:
    assert TransientConfig().auto_restore_enabled
    assert TransientConfig(auto_restore_delay_seconds=0).auto_restore_enabled
    assert not TransientConfig(auto_restore_delay_seconds=NEVER).auto_restore_enabled


def test_pager_keymap_action_for() -> None:
    keymap = PagerKeymap()
    assert keymap.action_for("q") is PagerAction.QUIT
    assert keymap.action_for("space") is PagerAction.PAGE_FORWARD
    assert keymap.action_for("delete") is PagerAction.PAGE_BACKWARD
    assert keymap.action_for("x") is PagerAction.OTHER


def test_key_down_builds_key_event() -> None:
    event = key_down("q")
    assert event.event_type == "key_down"
    assert event.value == "q"


def test_create_transient_display_uses_runtime_controller() -> None:
    host = HeadlessHost()
    bus = create_event_bus()

    display = create_transient_display(host, event_bus=bus)

    assert isinstance(display, TransientLoopController)
    assert not display.is_loop_active
    assert display.state.is_empty


@pytest.mark.parametrize("delay", [float("nan"), float("inf")])
def test_transient_config_rejects_non_finite_delay(delay: float) -> None:
    with pytest.raises(ValueError):
        TransientConfig(auto_restore_delay_seconds=delay)
