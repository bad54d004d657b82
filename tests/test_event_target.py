"""Tests for the named-channel event target."""

from __future__ import annotations

from typing import Any

import pytest

from signalkit.cancellation import CancellationSource
from signalkit.dispatch import Event, EventTarget
from signalkit.models import SubscribeOptions, UnsubscribeOptions


@pytest.fixture
def target() -> EventTarget:
    return EventTarget()


def test_dispatch_only_reaches_matching_channel(target: EventTarget):
    """Listeners only receive events of the channel they registered for."""
    received: list[tuple[str, Any]] = []
    target.add_event_listener("a", lambda event: received.append(("a", event.detail)))
    target.add_event_listener("b", lambda event: received.append(("b", event.detail)))

    target.dispatch_event(Event("a", 1))

    assert received == [("a", 1)]


def test_dispatch_returns_true_without_listeners(target: EventTarget):
    """Dispatching on an empty channel is a valid no-op."""
    assert target.dispatch_event(Event("nothing")) is True


def test_same_listener_is_added_once(target: EventTarget):
    """Re-adding a listener with the same capture flag keeps one registration."""
    calls: list[Event] = []

    def listener(event: Event) -> None:
        calls.append(event)

    target.add_event_listener("a", listener)
    target.add_event_listener("a", listener, SubscribeOptions(once=True))

    target.dispatch_event(Event("a"))
    target.dispatch_event(Event("a"))

    assert len(calls) == 2  # noqa: PLR2004
    assert target.listener_count("a") == 1


def test_capture_flag_is_part_of_registration(target: EventTarget):
    """The same listener may be registered once per capture flag."""
    calls: list[Event] = []
    listener = calls.append
    target.add_event_listener("a", listener)
    target.add_event_listener("a", listener, SubscribeOptions(capture=True))
    assert target.listener_count("a") == 2  # noqa: PLR2004

    target.remove_event_listener("a", listener, UnsubscribeOptions(capture=True))

    assert target.listener_count("a") == 1
    assert target.has_event_listener("a", listener)


def test_remove_unknown_listener_is_ignored(target: EventTarget):
    """Removing something that was never added does not raise."""
    target.remove_event_listener("a", print)
    target.add_event_listener("a", print)
    target.remove_event_listener("b", print)

    assert target.listener_count("a") == 1


def test_once_listener_is_removed_before_it_runs(target: EventTarget):
    """A once listener sees itself already removed while running."""
    seen_counts: list[int] = []

    def listener(event: Event) -> None:
        seen_counts.append(target.listener_count("a"))

    target.add_event_listener("a", listener, SubscribeOptions(once=True))
    target.dispatch_event(Event("a"))
    target.dispatch_event(Event("a"))

    assert seen_counts == [0]


def test_listener_added_during_dispatch_waits_for_next(target: EventTarget):
    """Listeners registered mid-dispatch are not called in that dispatch."""
    calls: list[str] = []

    def late(event: Event) -> None:
        calls.append("late")

    def early(event: Event) -> None:
        calls.append("early")
        target.add_event_listener("a", late)

    target.add_event_listener("a", early)
    target.dispatch_event(Event("a"))
    assert calls == ["early"]

    target.dispatch_event(Event("a"))
    assert calls == ["early", "early", "late"]


def test_cancellation_removes_registration(target: EventTarget):
    """Triggering the cancel token removes exactly the bound registration."""
    source = CancellationSource()
    calls: list[Event] = []
    listener = calls.append
    target.add_event_listener("a", listener, SubscribeOptions(cancel_token=source.token))

    source.cancel()
    target.dispatch_event(Event("a"))

    assert calls == []
    assert target.listener_count("a") == 0


def test_cancellation_does_not_remove_later_registration(target: EventTarget):
    """A token only affects the registration it was given with."""
    source = CancellationSource()
    calls: list[Event] = []
    listener = calls.append
    target.add_event_listener("a", listener, SubscribeOptions(cancel_token=source.token))
    target.remove_event_listener("a", listener)
    target.add_event_listener("a", listener)

    source.cancel()
    target.dispatch_event(Event("a"))

    assert len(calls) == 1


def test_clear_single_channel(target: EventTarget):
    """Clearing one channel leaves the others untouched."""
    target.add_event_listener("a", print)
    target.add_event_listener("b", print)

    target.clear("a")

    assert target.listener_count("a") == 0
    assert target.listener_count("b") == 1

    target.clear()
    assert target.listener_count("b") == 0
