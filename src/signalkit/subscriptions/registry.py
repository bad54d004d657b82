"""Subscriber to listener bookkeeping."""

from __future__ import annotations

from collections.abc import Hashable
import types
from typing import TYPE_CHECKING
from weakref import WeakValueDictionary

from signalkit.subscriptions.subscriber import create_listener


if TYPE_CHECKING:
    from signalkit.subscriptions.subscriber import Listener, Subscriber


def subscriber_key(subscriber: object) -> Hashable:
    """Identity key of a subscriber.

    Bound methods are recreated on every attribute access, so they are keyed by
    the identity of their instance and function instead of their own.
    """
    match subscriber:
        case types.MethodType():
            return (id(subscriber.__self__), id(subscriber.__func__))
        case types.BuiltinMethodType() if subscriber.__self__ is not None:
            return (id(subscriber.__self__), subscriber.__name__)
        case _:
            return id(subscriber)


class SubscriberRegistry:
    """Maps subscribers to the exact listener registered for them.

    Listeners are held weakly: an entry lives only as long as something else (the
    dispatcher, an in-flight broadcast) keeps its listener alive. Since a listener
    references its subscriber, a live entry also pins the subscriber identity its
    key was computed from, which keeps `id()` based keys unambiguous.
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: WeakValueDictionary[Hashable, Listener] = WeakValueDictionary()

    def resolve[T](self, subscriber: Subscriber[T]) -> Listener[T]:
        """Return the cached listener for subscriber, creating it if needed."""
        key = subscriber_key(subscriber)
        listener = self._listeners.get(key)
        if listener is None:
            listener = create_listener(subscriber)
            self._listeners[key] = listener
        return listener

    def get[T](self, subscriber: Subscriber[T]) -> Listener[T] | None:
        """Return the cached listener for subscriber, if any."""
        return self._listeners.get(subscriber_key(subscriber))

    def forget[T](self, subscriber: Subscriber[T]) -> None:
        """Drop the association so the next subscribe builds a fresh listener."""
        self._listeners.pop(subscriber_key(subscriber), None)

    def __contains__(self, subscriber: object) -> bool:
        return subscriber_key(subscriber) in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)
