"""Single-channel dispatcher used by every signal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signalkit.dispatch.event_target import Event, EventTarget


if TYPE_CHECKING:
    from signalkit.dispatch.event_target import EventListener
    from signalkit.models import SubscribeOptions, UnsubscribeOptions


logger = logging.getLogger(__name__)


class Dispatcher[T]:
    """An `EventTarget` fixed to one implicit channel.

    Callers never pass channel names, so they can't collide on them. The label
    doubles as the channel name and only shows up in logs and reprs.
    """

    __slots__ = ("_label", "_target")

    def __init__(self, label: str = "") -> None:
        self._label = label
        self._target = EventTarget()

    @property
    def label(self) -> str:
        return self._label

    @property
    def listener_count(self) -> int:
        """Number of currently registered listeners."""
        return self._target.listener_count(self._label)

    def register(self, listener: EventListener[T], options: SubscribeOptions | None = None) -> None:
        """Add listener to the channel."""
        self._target.add_event_listener(self._label, listener, options)

    def remove(self, listener: EventListener[T], options: UnsubscribeOptions | None = None) -> None:
        """Remove listener from the channel. Unknown listeners are ignored."""
        self._target.remove_event_listener(self._label, listener, options)

    def broadcast(self, detail: T | None = None) -> bool:
        """Deliver detail to all registered listeners synchronously.

        Returns:
            Always True: broadcasts are not cancelable.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Broadcasting on %r to %d listener(s)", self._label, self.listener_count)
        return self._target.dispatch_event(Event(self._label, detail, cancelable=False))

    def clear(self) -> None:
        """Remove every listener."""
        self._target.clear(self._label)

    def __contains__(self, listener: object) -> bool:
        return self._target.has_event_listener(self._label, listener)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._label!r}, listeners={self.listener_count})"
