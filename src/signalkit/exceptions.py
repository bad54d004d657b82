"""Exceptions raised by the signal system."""

from __future__ import annotations

from typing import Any


class SignalError(Exception):
    """Base class for all signalkit errors."""


class InvalidSubscriberError(SignalError, TypeError):
    """Raised when a subscriber is neither a callable nor a signal handler."""

    def __init__(self, subscriber: Any) -> None:
        super().__init__(
            f"Subscriber must be callable or define handle_signal(), got {subscriber!r}"
        )
        self.subscriber = subscriber
