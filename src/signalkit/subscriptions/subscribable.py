"""Base class for everything that can be subscribed to."""

from __future__ import annotations

from typing import TYPE_CHECKING

from signalkit.models import resolve_subscribe_options, resolve_unsubscribe_options
from signalkit.subscriptions.registry import SubscriberRegistry


if TYPE_CHECKING:
    from signalkit.cancellation import CancellationHandle
    from signalkit.dispatch import Dispatcher
    from signalkit.models import SubscribeOptions, UnsubscribeOptions
    from signalkit.subscriptions.subscriber import Subscriber


class SubscribableSignal[T]:
    """Subscription half of a signal.

    Accepts both subscriber forms, converts them to listeners and registers those
    with a dispatcher supplied by the subclass. How and when the dispatcher is
    activated is left to subclasses.

    The dispatcher is kept in a private slot, so this class grants no activation
    rights by itself.
    """

    __slots__ = ("__dispatcher", "__registry")

    def __init__(self, dispatcher: Dispatcher[T]) -> None:
        # Only subclasses decide who may activate the dispatcher.
        if type(self) is SubscribableSignal:
            msg = "SubscribableSignal is abstract, use Signal or ProtectedSignalController"
            raise TypeError(msg)
        self.__dispatcher = dispatcher
        self.__registry = SubscriberRegistry()

    @property
    def label(self) -> str:
        """Debug label of the underlying channel."""
        return self.__dispatcher.label

    def subscribe(
        self,
        subscriber: Subscriber[T],
        options: SubscribeOptions | None = None,
        *,
        once: bool | None = None,
        passive: bool | None = None,
        cancel_token: CancellationHandle | None = None,
        capture: bool | None = None,
    ) -> None:
        """Register subscriber to be notified on every activation.

        Subscribing the same function or object again without unsubscribing in
        between is a no-op.

        Args:
            subscriber: A callable taking the payload, or an object with
                `handle_signal(payload)`.
            options: Lifecycle options. Mutually exclusive with the keyword options.
            once: Remove the subscription after its first invocation.
            passive: Accepted for listener API compatibility, has no effect.
            cancel_token: Remove the subscription once this handle triggers.
            capture: Registration flag that has to be repeated on unsubscribe.

        Raises:
            InvalidSubscriberError: If subscriber has neither supported form.
            TypeError: If both options and keyword options are given.
        """
        resolved = resolve_subscribe_options(
            options, once=once, passive=passive, cancel_token=cancel_token, capture=capture
        )
        listener = self.__registry.resolve(subscriber)
        self.__dispatcher.register(listener, resolved)

    def unsubscribe(
        self,
        subscriber: Subscriber[T],
        options: UnsubscribeOptions | None = None,
        *,
        capture: bool | None = None,
    ) -> None:
        """Remove a subscriber.

        The subscriber has to be the same function or object passed to `subscribe`.
        Unknown subscribers are ignored.
        """
        resolved = resolve_unsubscribe_options(options, capture)
        listener = self.__registry.get(subscriber)
        if listener is None:
            return
        self.__dispatcher.remove(listener, resolved)
        if listener not in self.__dispatcher:
            self.__registry.forget(subscriber)

    def connect[S: Subscriber](self, subscriber: S) -> S:
        """Subscribe with default options. Can be used as decorator."""
        self.subscribe(subscriber)
        return subscriber

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"
