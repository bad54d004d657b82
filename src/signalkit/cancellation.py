"""Cancellation handles that end subscriptions from the outside.

The signal system only depends on the `CancellationHandle` protocol. Any object
with `is_triggered()` and `on_trigger(callback)` can be passed as `cancel_token`.

Example:
    source = CancellationSource()
    signal.subscribe(on_change, cancel_token=source.token)
    source.cancel()  # on_change is removed from signal
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Callable


logger = logging.getLogger(__name__)


@runtime_checkable
class CancellationHandle(Protocol):
    """Anything that can be triggered once and notify callbacks about it."""

    def is_triggered(self) -> bool:
        """Return whether the handle has already been triggered."""
        ...

    def on_trigger(self, callback: Callable[[], object]) -> Callable[[], object] | None:
        """Run callback once when the handle is triggered.

        May return a function that detaches callback again. Subscriptions call it
        when they end before the handle triggers.
        """
        ...


class CancellationToken:
    """Observer facet of a `CancellationSource`.

    Tokens can only be watched. Triggering is reserved to the source that owns them.
    """

    __slots__ = ("_callbacks", "_reason", "_triggered")

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], object]] = []
        self._reason: Any = None
        self._triggered = False

    def is_triggered(self) -> bool:
        return self._triggered

    @property
    def reason(self) -> Any:
        """Value passed to `CancellationSource.cancel`, if any."""
        return self._reason

    def on_trigger(self, callback: Callable[[], object]) -> Callable[[], None] | None:
        """Register callback for the trigger transition.

        If the token is already triggered, callback runs immediately.

        Returns:
            A function removing callback again, or None if it already ran.
        """
        if self._triggered:
            callback()
            return None
        self._callbacks.append(callback)

        def detach() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return detach

    def _trigger(self, reason: Any) -> None:
        if self._triggered:
            return
        self._triggered = True
        self._reason = reason
        callbacks, self._callbacks = self._callbacks, []
        logger.debug("Cancellation triggered, notifying %d callback(s)", len(callbacks))
        errors: list[Exception] = []
        for callback in callbacks:
            try:
                callback()
            except Exception as e:  # noqa: BLE001
                errors.append(e)
        if len(errors) == 1:
            raise errors[0]
        if errors:
            msg = "Cancellation callbacks failed"
            raise ExceptionGroup(msg, errors)

    def __repr__(self) -> str:
        state = "triggered" if self._triggered else "pending"
        return f"{type(self).__name__}({state})"


class CancellationSource:
    """Owner facet holding the right to trigger a `CancellationToken`."""

    __slots__ = ("_token",)

    def __init__(self) -> None:
        self._token = CancellationToken()

    @property
    def token(self) -> CancellationToken:
        """The token to hand out to subscriptions."""
        return self._token

    @property
    def cancelled(self) -> bool:
        return self._token.is_triggered()

    def cancel(self, reason: Any = None) -> None:
        """Trigger the token. Cancelling twice is a no-op."""
        self._token._trigger(reason)  # noqa: SLF001
