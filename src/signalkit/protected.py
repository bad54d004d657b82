"""Protected signals: observable by anyone, activated only by their owner.

The owner keeps a `ProtectedSignalController` private and publishes its
`signal`. Both share a single dispatcher; the published `ProtectedSignal` has
no activation method at all.

Example:
    class Counter:
        def __init__(self) -> None:
            self.value = 0
            self._changed = ProtectedSignalController[int]("changed")
            self.on_change = self._changed.signal

        def increment(self) -> None:
            self.value += 1
            self._changed.activate(self.value)
"""

from __future__ import annotations

from signalkit.dispatch import Dispatcher
from signalkit.subscriptions import SubscribableSignal


class ProtectedSignal[T](SubscribableSignal[T]):
    """Subscription-only facet of a `ProtectedSignalController`."""

    __slots__ = ()


class ProtectedSignalController[T]:
    """Owner facet holding the activation right of a protected signal."""

    __slots__ = ("_dispatcher", "_signal")

    def __init__(self, label: str = "") -> None:
        self._dispatcher = Dispatcher[T](label)
        self._signal = ProtectedSignal[T](self._dispatcher)

    @property
    def signal(self) -> ProtectedSignal[T]:
        """The paired signal to hand out to observers. Always the same object."""
        return self._signal

    @property
    def label(self) -> str:
        return self._dispatcher.label

    def activate(self, detail: T | None = None) -> bool:
        """Deliver detail to every subscriber of `signal` before returning.

        Returns:
            Always True: activations are not cancelable.
        """
        return self._dispatcher.broadcast(detail)

    def clear(self) -> None:
        """Remove all subscriptions of the paired signal."""
        self._dispatcher.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


ActivationGate = ProtectedSignalController
