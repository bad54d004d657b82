"""Synchronous named-channel event target.

A small, flat replacement for DOM-style event targets: listeners are registered
per channel name, dispatch is synchronous and happens in registration order.
There is no bubbling, no capture phase and no default action.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING
import weakref

from signalkit.models import SubscribeOptions, UnsubscribeOptions


if TYPE_CHECKING:
    from collections.abc import Callable

    from signalkit.cancellation import CancellationHandle

    type EventListener[T] = Callable[[Event[T]], object]


logger = logging.getLogger(__name__)

_DEFAULT_SUBSCRIBE = SubscribeOptions()
_DEFAULT_UNSUBSCRIBE = UnsubscribeOptions()


@dataclass(frozen=True, slots=True)
class Event[T]:
    """Envelope carried to every listener of a channel."""

    type: str
    """Name of the channel the event was dispatched on."""

    detail: T | None = None
    """The payload."""

    cancelable: bool = False
    """Signal events are never cancelable."""


@dataclass(slots=True, eq=False, weakref_slot=True)
class _Registration:
    listener: EventListener
    capture: bool
    once: bool
    removed: bool = False
    detach: Callable[[], object] | None = None

    def end(self) -> None:
        self.removed = True
        detach, self.detach = self.detach, None
        if detach is not None:
            detach()


class EventTarget:
    """Registry of listeners grouped by channel name."""

    __slots__ = ("__weakref__", "_channels")

    def __init__(self) -> None:
        self._channels: dict[str, list[_Registration]] = {}

    def add_event_listener(
        self,
        type: str,  # noqa: A002
        listener: EventListener,
        options: SubscribeOptions | None = None,
    ) -> None:
        """Register listener for events of the given type.

        A listener already registered for the same type and capture flag is not
        added twice; the options of the first registration are kept.

        Args:
            type: Channel name.
            listener: Callable receiving the `Event`.
            options: Lifecycle options such as `once` or `cancel_token`.
        """
        options = options or _DEFAULT_SUBSCRIBE
        token = options.cancel_token
        if token is not None and token.is_triggered():
            logger.debug("Not adding %r to %r: cancel token already triggered", listener, type)
            return
        registrations = self._channels.setdefault(type, [])
        if self._find(registrations, listener, options.capture) is not None:
            return
        registration = _Registration(listener, capture=options.capture, once=options.once)
        registrations.append(registration)
        logger.debug("Added listener %r to %r (once=%s)", listener, type, options.once)
        if token is not None:
            self._bind_cancellation(type, registration, token)

    def remove_event_listener(
        self,
        type: str,  # noqa: A002
        listener: EventListener,
        options: UnsubscribeOptions | None = None,
    ) -> None:
        """Remove a registration. Unknown listeners are ignored."""
        options = options or _DEFAULT_UNSUBSCRIBE
        registrations = self._channels.get(type)
        if not registrations:
            return
        registration = self._find(registrations, listener, options.capture)
        if registration is not None:
            self._discard(type, registration)
            logger.debug("Removed listener %r from %r", listener, type)

    def dispatch_event(self, event: Event) -> bool:
        """Invoke all listeners of `event.type` synchronously.

        Listeners are called in registration order on a snapshot taken when the
        dispatch starts. Listeners added during the dispatch are not called, listeners
        removed before being reached are skipped. Exceptions raised by a listener
        propagate and end the dispatch.

        Returns:
            True, since signal events can't be cancelled.
        """
        registrations = self._channels.get(event.type)
        if not registrations:
            return True
        for registration in tuple(registrations):
            if registration.removed:
                continue
            if registration.once:
                self._discard(event.type, registration)
            registration.listener(event)
        return True

    def has_event_listener(self, type: str, listener: EventListener) -> bool:  # noqa: A002
        """Whether listener is registered for a channel, with any capture flag."""
        return any(r.listener is listener for r in self._channels.get(type, ()))

    def listener_count(self, type: str) -> int:  # noqa: A002
        """Number of listeners currently registered for a channel."""
        return len(self._channels.get(type, ()))

    def clear(self, type: str | None = None) -> None:  # noqa: A002
        """Remove all listeners of one channel, or of every channel."""
        types = list(self._channels) if type is None else [type]
        for channel in types:
            for registration in self._channels.pop(channel, ()):
                registration.end()

    @staticmethod
    def _find(
        registrations: list[_Registration], listener: EventListener, capture: bool
    ) -> _Registration | None:
        for registration in registrations:
            if registration.listener is listener and registration.capture == capture:
                return registration
        return None

    def _discard(self, type: str, registration: _Registration) -> None:  # noqa: A002
        registration.end()
        registrations = self._channels.get(type)
        if registrations is None:
            return
        registrations.remove(registration)
        if not registrations:
            del self._channels[type]

    def _bind_cancellation(
        self,
        type: str,  # noqa: A002
        registration: _Registration,
        token: CancellationHandle,
    ) -> None:
        # The token must not keep the target or the listener alive.
        target_ref = weakref.ref(self)
        registration_ref = weakref.ref(registration)

        def on_cancel() -> None:
            target = target_ref()
            current = registration_ref()
            if target is None or current is None or current.removed:
                return
            target._discard(type, current)  # noqa: SLF001
            logger.debug("Removed listener %r from %r on cancellation", current.listener, type)

        detach = token.on_trigger(on_cancel)
        if registration.removed:
            return
        registration.detach = detach if callable(detach) else None
