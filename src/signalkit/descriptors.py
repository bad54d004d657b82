"""Declarative signals defined at class level.

Usage:
    class Document:
        saved = SignalAttribute[str]()

    doc = Document()

    @doc.saved.connect
    def on_save(path: str) -> None:
        print(f"Saved to {path}")

    doc.saved.activate("/tmp/doc.txt")
"""

from __future__ import annotations

from typing import Self, overload
import weakref

from signalkit.signal import Signal


class SignalAttribute[T]:
    """Descriptor: define at class level, get a `Signal` per instance.

    Signals are created on first access and live as long as their instance.
    Instances are told apart by identity, so unhashable owners and owners that
    compare equal each get a signal of their own.
    The attribute name becomes the signal label.
    """

    __slots__ = ("_name", "_signals")

    def __init__(self) -> None:
        self._name: str = ""
        self._signals: dict[int, Signal[T]] = {}

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @overload
    def __get__(self, obj: None, owner: type | None = None) -> Self: ...

    @overload
    def __get__(self, obj: object, owner: type | None = None) -> Signal[T]: ...

    def __get__(self, obj: object | None, owner: type | None = None) -> Signal[T] | Self:
        if obj is None:
            return self
        key = id(obj)
        if (signal := self._signals.get(key)) is None:
            # Runs while obj is being collected, before its id can be reused.
            weakref.finalize(obj, self._signals.pop, key, None)
            signal = self._signals[key] = Signal[T](self._name)
        return signal
