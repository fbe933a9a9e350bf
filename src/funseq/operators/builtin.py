"""Built-in operators available to every pipeline.

All built-ins live in ``default_registry``. Pipeline documents refer to
them by name; see ``funseq operators`` for the full list.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from funseq.operators.registry import OperatorKind, OperatorRegistry

default_registry = OperatorRegistry("default")

MAP = OperatorKind.MAP
FILTER = OperatorKind.FILTER
REDUCE = OperatorKind.REDUCE


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------


@default_registry.register("multiply", MAP)
def multiply(factor: Any) -> Callable[[Any], Any]:
    """Multiply each element by the operand."""
    return lambda it: it * factor


@default_registry.register("add_constant", MAP)
def add_constant(amount: Any) -> Callable[[Any], Any]:
    """Add the operand to each element."""
    return lambda it: it + amount


@default_registry.register("negate", MAP, takes_arg=False)
def negate() -> Callable[[Any], Any]:
    """Negate each element."""
    return lambda it: -it


@default_registry.register("identity", MAP, takes_arg=False)
def identity() -> Callable[[Any], Any]:
    """Pass each element through unchanged."""
    return lambda it: it


# ---------------------------------------------------------------------------
# filter
# ---------------------------------------------------------------------------


@default_registry.register("greater_than", FILTER)
def greater_than(threshold: Any) -> Callable[[Any], bool]:
    """Keep elements strictly greater than the operand."""
    return lambda it: it > threshold


@default_registry.register("less_than", FILTER)
def less_than(threshold: Any) -> Callable[[Any], bool]:
    """Keep elements strictly less than the operand."""
    return lambda it: it < threshold


@default_registry.register("equals", FILTER)
def equals(value: Any) -> Callable[[Any], bool]:
    """Keep elements equal to the operand."""
    return lambda it: it == value


@default_registry.register("is_even", FILTER, takes_arg=False)
def is_even() -> Callable[[Any], bool]:
    """Keep even integers."""
    return lambda it: it % 2 == 0


@default_registry.register("is_odd", FILTER, takes_arg=False)
def is_odd() -> Callable[[Any], bool]:
    """Keep odd integers."""
    return lambda it: it % 2 != 0


# ---------------------------------------------------------------------------
# reduce
# ---------------------------------------------------------------------------


@default_registry.register("add", REDUCE, takes_arg=False)
def add() -> Callable[[Any, Any], Any]:
    """Sum the elements."""
    return lambda acc, it: acc + it


@default_registry.register("product", REDUCE, takes_arg=False)
def product() -> Callable[[Any, Any], Any]:
    """Multiply the elements together."""
    return lambda acc, it: acc * it


@default_registry.register("maximum", REDUCE, takes_arg=False)
def maximum() -> Callable[[Any, Any], Any]:
    """Keep the largest element."""
    return lambda acc, it: it if it > acc else acc


@default_registry.register("minimum", REDUCE, takes_arg=False)
def minimum() -> Callable[[Any, Any], Any]:
    """Keep the smallest element."""
    return lambda acc, it: it if it < acc else acc
