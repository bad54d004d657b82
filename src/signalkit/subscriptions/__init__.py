"""Subscriber forms, bookkeeping and the subscribable base class."""

from __future__ import annotations

from signalkit.subscriptions.registry import SubscriberRegistry
from signalkit.subscriptions.subscribable import SubscribableSignal
from signalkit.subscriptions.subscriber import (
    Listener,
    SignalCallback,
    SignalHandler,
    Subscriber,
    create_listener,
)

__all__ = [
    "Listener",
    "SignalCallback",
    "SignalHandler",
    "SubscribableSignal",
    "Subscriber",
    "SubscriberRegistry",
    "create_listener",
]
