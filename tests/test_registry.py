"""Tests for subscriber to listener bookkeeping."""

from __future__ import annotations

import gc
from typing import Any
import weakref

import pytest

from signalkit.dispatch import Event
from signalkit.exceptions import InvalidSubscriberError
from signalkit.subscriptions import Listener, SubscriberRegistry, create_listener
from signalkit.subscriptions.registry import subscriber_key


class Recorder:
    """Handler-form subscriber recording what it receives."""

    def __init__(self) -> None:
        self.received: list[Any] = []

    def handle_signal(self, detail: Any) -> None:
        self.received.append(detail)

    def on_value(self, detail: Any) -> None:
        self.received.append(("method", detail))


@pytest.fixture
def registry() -> SubscriberRegistry:
    return SubscriberRegistry()


def test_resolve_reuses_listener(registry: SubscriberRegistry):
    """The same subscriber always resolves to the same listener."""
    recorder = Recorder()
    listener = registry.resolve(recorder)

    assert registry.resolve(recorder) is listener
    assert registry.get(recorder) is listener
    assert recorder in registry


def test_forget_builds_fresh_listener(registry: SubscriberRegistry):
    recorder = Recorder()
    first = registry.resolve(recorder)

    registry.forget(recorder)
    registry.forget(recorder)

    assert registry.get(recorder) is None
    assert registry.resolve(recorder) is not first


def test_bound_methods_share_identity(registry: SubscriberRegistry):
    """Two accesses of obj.method count as the same subscriber."""
    recorder = Recorder()
    assert recorder.on_value is not recorder.on_value
    assert subscriber_key(recorder.on_value) == subscriber_key(recorder.on_value)

    listener = registry.resolve(recorder.on_value)

    assert registry.resolve(recorder.on_value) is listener
    assert subscriber_key(recorder.on_value) != subscriber_key(Recorder().on_value)


def test_identity_not_equality(registry: SubscriberRegistry):
    """Equal but distinct objects are different subscribers."""

    class AlwaysEqual(Recorder):
        def __eq__(self, other: object) -> bool:
            return True

        __hash__ = None  # type: ignore[assignment]

    first, second = AlwaysEqual(), AlwaysEqual()

    assert registry.resolve(first) is not registry.resolve(second)


def test_registry_does_not_keep_subscriber_alive(registry: SubscriberRegistry):
    """Once nothing else holds the listener, the entry and subscriber go away."""
    recorder = Recorder()
    registry.resolve(recorder)
    ref = weakref.ref(recorder)

    del recorder
    gc.collect()

    assert ref() is None
    assert len(registry) == 0


def test_listener_forwards_detail_for_both_forms():
    recorder = Recorder()
    collected: list[int] = []

    create_listener(recorder)(Event("x", 1))
    create_listener(collected.append)(Event("x", 2))

    assert recorder.received == [1]
    assert collected == [2]


def test_callable_takes_precedence_over_handler():
    calls: list[str] = []

    class Both:
        def __call__(self, detail: str) -> None:
            calls.append(f"call {detail}")

        def handle_signal(self, detail: str) -> None:
            calls.append(f"handle {detail}")

    create_listener(Both())(Event("x", "a"))

    assert calls == ["call a"]


def test_invalid_subscriber_is_rejected(registry: SubscriberRegistry):
    with pytest.raises(InvalidSubscriberError) as exc_info:
        registry.resolve(object())  # type: ignore[arg-type]
    assert isinstance(exc_info.value, TypeError)
    assert len(registry) == 0


def test_listener_repr():
    assert repr(Listener(print, is_handler=False)) == "Listener(<built-in function print>)"
