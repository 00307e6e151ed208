from __future__ import annotations

import pytest

from transient.api.config import NEVER, TransientConfig
from transient.api.events import AutoRestoreArmed, LayoutRestored, LoopExited, SurfaceDisplayed
from transient.api.input_events import KeyEvent, key_down
from transient.runtime.controller import TransientLoopController
from transient.window.headless import HeadlessHost

from tests.transient.conftest import CancelRecordingHost, FailingSchedulerHost, RecordingBus, lines_of


def test_quit_shows_content_then_restores_immediately(host: HeadlessHost, controller) -> None:
    host.feed_keys(["q"])

    controller.display("out", lambda: print("hello"))

    assert host.surface("out").lines == ["hello"]
    assert host.surfaces.visible == ("main",)
    assert host.layout_restores == 1
    assert controller.state.is_empty
    assert host.scheduler.queued_task_count == 0


def test_unrelated_key_stops_loop_and_stays_available(host: HeadlessHost, bus: RecordingBus) -> None:
    controller = TransientLoopController(host, TransientConfig(auto_restore_delay_seconds=0), event_bus=bus)
    host.feed_keys(["space", "x"])

    controller.display("out", lambda: print("hello"))

    assert host.pushed_back == [key_down("x")]
    assert host.is_surface_visible("out")
    assert controller.timer.is_pending

    host.advance(0.0)

    assert not host.is_surface_visible("out")
    assert controller.state.is_empty
    assert host.read_next_input_event() == key_down("x")


def test_never_delay_requires_manual_restore(host: HeadlessHost) -> None:
    controller = TransientLoopController(host, TransientConfig(auto_restore_delay_seconds=NEVER))
    host.feed_keys(["x"])

    controller.display("out", lambda: print("hello"))
    host.advance(60.0)

    assert not controller.timer.is_pending
    assert host.is_surface_visible("out")
    assert controller.restore() is True
    assert not host.is_surface_visible("out")
    assert controller.restore() is False


def test_display_returns_producer_value(host: HeadlessHost, controller) -> None:
    host.feed_keys(["x"])

    result = controller.display("out", lambda: 42)

    assert result == 42


def test_stop_event_is_pushed_back_exactly_once(host: HeadlessHost, controller) -> None:
    event = KeyEvent(event_type="key_down", value="z")
    seen: list[object] = []
    host.feed(key_down("a"), event)

    def _handler(incoming: object) -> bool:
        seen.append(incoming)
        return incoming != event

    controller.display("out", lambda: None, _handler)

    assert seen == [key_down("a"), event]
    assert host.pushed_back == [event]


def test_nested_display_restores_layout_from_before_outer_call(host: HeadlessHost, controller) -> None:
    before = host.capture_layout()

    def _outer(event: object) -> bool:
        if event == key_down("n"):
            host.feed_keys(["x"])
            controller.display("inner", lambda: print("inner"), lambda _: False)
            assert controller.state.saved_layout == before
            assert controller.state.surface_id == "inner"
            assert not controller.timer.is_pending
            return True
        return False

    host.feed_keys(["n"])
    controller.display("outer", lambda: print("outer"), _outer)

    assert controller.state.saved_layout == before
    assert controller.timer.is_pending
    host.advance(1.0)

    assert host.surfaces.capture_layout() == before


def test_new_cycle_supersedes_pending_timer() -> None:
    host = CancelRecordingHost(page_lines=3)
    controller = TransientLoopController(host, TransientConfig(auto_restore_delay_seconds=1.0))
    before = host.capture_layout()
    host.feed_keys(["x"])
    controller.display("first", lambda: print("one"))
    stale = controller.state.pending_timer

    host.advance(0.5)

    def _second_handler(event: object) -> bool:
        # The earlier timer would be due here if it had not been canceled.
        host.advance(0.75)
        assert host.is_surface_visible("second")
        return False

    controller.display("second", lambda: print("two"), _second_handler)

    assert stale in host.canceled
    assert controller.state.pending_timer != stale
    assert controller.state.saved_layout == before
    host.advance(1.0)
    assert not host.is_surface_visible("second")
    assert host.surfaces.capture_layout() == before


def test_content_failure_propagates_without_showing_or_mutating(host: HeadlessHost, controller) -> None:
    def _boom() -> None:
        print("partial")
        raise KeyError("missing")

    with pytest.raises(KeyError):
        controller.display("out", _boom)

    assert not host.surface_exists("out")
    assert controller.state.is_empty


def test_content_failure_rearms_superseded_timer(host: HeadlessHost, controller) -> None:
    host.feed_keys(["x"])
    controller.display("out", lambda: print("ok"))
    assert controller.timer.is_pending

    with pytest.raises(RuntimeError):
        controller.display("other", _raise_runtime_error)

    assert controller.timer.is_pending
    host.advance(1.0)
    assert not host.is_surface_visible("out")


def _raise_runtime_error() -> None:
    raise RuntimeError("producer failed")


def test_surface_gone_ends_loop_without_reinjection(host: HeadlessHost, controller, bus) -> None:
    host.feed_keys(["space", "space"])

    def _handler(event: object) -> bool:
        host.kill_surface("out")
        return True

    controller.display("out", lambda: print("hello"), _handler)

    assert host.pushed_back == []
    assert host.pending_input == (key_down("space"),)
    assert bus.of_type(LoopExited) == [LoopExited(surface_id="out", reason="surface_gone", reinjected=False)]
    host.advance(1.0)
    assert controller.state.saved_layout is None


def test_scheduling_failure_leaves_layout_for_next_cycle() -> None:
    host = FailingSchedulerHost(page_lines=3)
    controller = TransientLoopController(host)
    before = host.capture_layout()
    host.feed_keys(["x", "q"])

    controller.display("first", lambda: print("one"))
    assert controller.state.saved_layout == before
    assert not controller.timer.is_pending

    host.read_next_input_event()
    controller.display("second", lambda: print("two"))

    assert host.surfaces.capture_layout() == before
    assert controller.state.is_empty


def test_default_pager_pages_forward_and_wraps(host: HeadlessHost, controller) -> None:
    host.feed_keys(["space", "space", "space", "x"])
    tops: list[int] = []
    pager = controller.default_pager("out")

    def _handler(event: object) -> bool:
        keep = pager(event)
        if keep:
            tops.append(host.surface("out").top_line)
        return keep

    controller.display("out", lambda: print(lines_of(7)), _handler)

    assert tops == [3, 4, 0]


def test_lifecycle_events_are_published_in_order(host: HeadlessHost, controller, bus) -> None:
    host.feed_keys(["x"])

    controller.display("out", lambda: print("hello"))
    host.advance(1.0)

    assert [type(event) for event in bus.events] == [
        SurfaceDisplayed,
        LoopExited,
        AutoRestoreArmed,
        LayoutRestored,
    ]
    assert bus.of_type(LayoutRestored) == [LayoutRestored(surface_id="out", restored=True)]


def test_clear_cancels_timer_without_restoring(host: HeadlessHost, controller) -> None:
    host.feed_keys(["x"])
    controller.display("out", lambda: print("hello"))

    controller.clear()
    host.advance(5.0)

    assert host.is_surface_visible("out")
    assert host.layout_restores == 0
    assert controller.state.is_empty


def test_display_rejects_empty_surface_id(controller) -> None:
    with pytest.raises(ValueError):
        controller.display("", lambda: None)


def test_handler_failure_still_arms_auto_restore(host: HeadlessHost, controller) -> None:
    host.feed_keys(["x"])

    def _handler(event: object) -> bool:
        raise RuntimeError("handler bug")

    with pytest.raises(RuntimeError):
        controller.display("out", lambda: print("hello"), _handler)

    assert not controller.is_loop_active
    assert controller.timer.is_pending
    host.advance(1.0)
    assert not host.is_surface_visible("out")
    assert controller.state.is_empty


def test_input_failure_still_arms_auto_restore(host: HeadlessHost, controller) -> None:
    with pytest.raises(RuntimeError, match="exhausted"):
        controller.display("out", lambda: print("hello"))

    assert controller.timer.is_pending
    host.advance(1.0)
    assert not host.is_surface_visible("out")
