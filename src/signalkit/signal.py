"""Open signals: anyone holding them may subscribe and activate."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from signalkit.dispatch import Dispatcher
from signalkit.subscriptions import SubscribableSignal


@runtime_checkable
class Activable[T](Protocol):
    """Something that can be activated with an optional payload."""

    def activate(self, detail: T | None = None, /) -> bool: ...


class Signal[T](SubscribableSignal[T]):
    """A signal that can be both observed and activated.

    Subscribers are either functions receiving the payload or objects with a
    `handle_signal(payload)` method.

    Example:
        class Counter:
            def __init__(self) -> None:
                self.value = 0
                self.on_change = Signal[int]()

            def increment(self) -> None:
                self.value += 1
                self.on_change.activate(self.value)

        counter = Counter()
        counter.on_change.subscribe(lambda value: print("Counter changed to", value))
    """

    __slots__ = ("_dispatcher",)

    def __init__(self, label: str = "") -> None:
        dispatcher = Dispatcher[T](label)
        super().__init__(dispatcher)
        self._dispatcher = dispatcher

    def activate(self, detail: T | None = None) -> bool:
        """Deliver detail to every current subscriber before returning.

        Exceptions raised by a subscriber propagate to the caller, subscribers
        after it are not notified.

        Args:
            detail: Payload to deliver. `None` if omitted.

        Returns:
            Always True: activations are not cancelable.
        """
        return self._dispatcher.broadcast(detail)

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._dispatcher.clear()


OpenSignal = Signal
