"""Subscription option models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from signalkit.cancellation import CancellationHandle


class UnsubscribeOptions(BaseModel):
    """Options used to match a registration on removal."""

    capture: bool = False
    """Must match the `capture` flag the subscription was registered with."""

    model_config = ConfigDict(
        use_attribute_docstrings=True,
        extra="forbid",
        frozen=True,
    )


class SubscribeOptions(UnsubscribeOptions):
    """Options controlling the lifecycle of a single subscription."""

    once: bool = False
    """Remove the subscription automatically before its first invocation runs."""

    passive: bool = False
    """Accepted for compatibility with listener APIs. Has no effect."""

    cancel_token: CancellationHandle | None = None
    """Remove the subscription when this handle is triggered."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def resolve_subscribe_options(
    options: SubscribeOptions | None, **overrides: Any
) -> SubscribeOptions:
    """Build subscribe options from either an options object or keyword arguments.

    Args:
        options: Explicit options object.
        overrides: Keyword options, `None` meaning "not given".
    """
    given = {key: value for key, value in overrides.items() if value is not None}
    if options is None:
        return SubscribeOptions(**given)
    if given:
        msg = f"Pass either an options object or keyword options, not both: {sorted(given)}"
        raise TypeError(msg)
    return options


def resolve_unsubscribe_options(
    options: UnsubscribeOptions | None, capture: bool | None = None
) -> UnsubscribeOptions:
    """Counterpart of `resolve_subscribe_options` for removals."""
    if options is None:
        return UnsubscribeOptions() if capture is None else UnsubscribeOptions(capture=capture)
    if capture is not None:
        msg = "Pass either an options object or keyword options, not both: ['capture']"
        raise TypeError(msg)
    return options
