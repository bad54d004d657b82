"""Event dispatch substrate."""

from __future__ import annotations

from signalkit.dispatch.dispatcher import Dispatcher
from signalkit.dispatch.event_target import Event, EventTarget

__all__ = ["Dispatcher", "Event", "EventTarget"]
