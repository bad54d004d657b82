"""Synchronous, type-safe signals.

Provides open signals that anyone may activate and protected signals whose
activation is reserved to the owning component.

Example:
    # Open signal
    on_change = Signal[int]()
    on_change.subscribe(print)
    on_change.activate(42)

    # Protected signal
    class Counter:
        def __init__(self) -> None:
            self._changed = ProtectedSignalController[int]()
            self.on_change = self._changed.signal
"""

from __future__ import annotations

from signalkit.cancellation import CancellationHandle, CancellationSource, CancellationToken
from signalkit.descriptors import SignalAttribute
from signalkit.exceptions import InvalidSubscriberError, SignalError
from signalkit.models import SubscribeOptions, UnsubscribeOptions
from signalkit.protected import ActivationGate, ProtectedSignal, ProtectedSignalController
from signalkit.signal import Activable, OpenSignal, Signal
from signalkit.subscriptions import (
    SignalCallback,
    SignalHandler,
    SubscribableSignal,
    Subscriber,
)

__version__ = "0.1.0"

__all__ = [
    "Activable",
    "ActivationGate",
    "CancellationHandle",
    "CancellationSource",
    "CancellationToken",
    "InvalidSubscriberError",
    "OpenSignal",
    "ProtectedSignal",
    "ProtectedSignalController",
    "SignalAttribute",
    "SignalCallback",
    "SignalError",
    "SignalHandler",
    "SubscribableSignal",
    "SubscribeOptions",
    "Subscriber",
    "UnsubscribeOptions",
]
