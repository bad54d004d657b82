"""Subscriber forms and the listener adapter bridging them to the dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from signalkit.exceptions import InvalidSubscriberError


if TYPE_CHECKING:
    from signalkit.dispatch.event_target import Event


class SignalCallback[T](Protocol):
    """Function form of a subscriber: receives the payload directly.

    Example:
        def on_change(value: int) -> None:
            print(value)
    """

    def __call__(self, detail: T, /) -> None: ...


@runtime_checkable
class SignalHandler[T](Protocol):
    """Object form of a subscriber: receives the payload via `handle_signal`.

    Useful when handling needs state or context of its own.

    Example:
        class Logger:
            def handle_signal(self, message: str) -> None:
                print("Log:", message)
    """

    def handle_signal(self, detail: T, /) -> None: ...


type Subscriber[T] = SignalCallback[T] | SignalHandler[T]


class Listener[T]:
    """Adapter created once per (signal, subscriber) pair.

    Called with the dispatched `Event`, forwards `event.detail` to the subscriber
    in its own calling convention.
    """

    __slots__ = ("__weakref__", "_is_handler", "subscriber")

    def __init__(self, subscriber: Subscriber[T], *, is_handler: bool) -> None:
        self.subscriber = subscriber
        self._is_handler = is_handler

    def __call__(self, event: Event[T]) -> None:
        if self._is_handler:
            self.subscriber.handle_signal(event.detail)  # type: ignore[union-attr]
        else:
            self.subscriber(event.detail)  # type: ignore[operator]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.subscriber!r})"


def create_listener[T](subscriber: Subscriber[T]) -> Listener[T]:
    """Wrap a subscriber into a listener.

    Callables take precedence: an object that is callable and also defines
    `handle_signal` is treated as a callback.

    Raises:
        InvalidSubscriberError: If subscriber has neither form.
    """
    if callable(subscriber):
        return Listener(subscriber, is_handler=False)
    if callable(getattr(subscriber, "handle_signal", None)):
        return Listener(subscriber, is_handler=True)
    raise InvalidSubscriberError(subscriber)
