"""Closure capture demonstrations.

Python closures look names up when they are *called*, not when they are
created. A callback defined inside a loop therefore observes whatever
value the loop variable holds at call time. These helpers build the same
list of callbacks three ways so the difference can be printed and tested:

``CaptureMode.VALUE``
    Each callback stores its own copy of the counter, bound through a
    default argument at creation time. Calling them yields ``0..count-1``.
``CaptureMode.REFERENCE``
    Every callback reads one shared counter cell. The loop leaves the
    counter one past its last iteration, so every call yields ``count``.
``CaptureMode.FACTORY``
    A per-iteration enclosing function receives the counter as a
    parameter and returns the callback, giving each callback its own
    cell. Calling them yields ``0..count-1``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum

logger = logging.getLogger(__name__)

Callback = Callable[[], int]


class CaptureMode(Enum):
    """Strategy used to bind the loop counter into each callback."""

    VALUE = "value"
    REFERENCE = "reference"
    FACTORY = "factory"


def callbacks_by_value(count: int) -> list[Callback]:
    """Return callbacks that each captured a copy of the counter."""
    callbacks: list[Callback] = []
    for i in range(count):
        callbacks.append(lambda i=i: i)
    return callbacks


def callbacks_by_reference(count: int) -> list[Callback]:
    """Return callbacks that all share one live counter.

    The counter is advanced the way a ``for (i = 0; i < count; i++)``
    loop would, so after the loop it equals ``count``.
    """
    callbacks: list[Callback] = []
    i = 0
    while i < count:
        callbacks.append(lambda: i)
        i += 1
    return callbacks


def callbacks_via_factory(count: int) -> list[Callback]:
    """Return callbacks built by an enclosing factory per iteration."""

    def make(x: int) -> Callback:
        def callback() -> int:
            return x

        return callback

    return [make(i) for i in range(count)]


_BUILDERS: dict[CaptureMode, Callable[[int], list[Callback]]] = {
    CaptureMode.VALUE: callbacks_by_value,
    CaptureMode.REFERENCE: callbacks_by_reference,
    CaptureMode.FACTORY: callbacks_via_factory,
}


def make_callbacks(mode: CaptureMode | str, count: int = 4) -> list[Callback]:
    """Build ``count`` callbacks using the capture strategy ``mode``.

    Raises
    ------
    ValueError
        If ``count`` is negative or ``mode`` names no known strategy.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    resolved = CaptureMode(mode)
    logger.debug("Building %d callback(s) with %s capture", count, resolved.value)
    return _BUILDERS[resolved](count)


def invoke_all(callbacks: Iterable[Callback]) -> list[int]:
    """Call each callback in creation order and collect the results."""
    return [callback() for callback in callbacks]
