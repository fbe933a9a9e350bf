"""Functional sequence container.

``FunctionalSequence`` is an ordered, insertion-order-preserving
collection exposing ``map``, ``filter`` and ``reduce`` as chainable
methods. Every chain step returns a *new* object; the receiver is never
modified. The only in-place mutations are the explicit growth helpers
``append``/``extend`` and ``clear``.

Example
-------
::

    from funseq import FunctionalSequence

    total = (
        FunctionalSequence([10, 20, 30, 40, 50])
        .map(lambda it: it * 3)
        .filter(lambda it: it > 100)
        .reduce(lambda acc, it: acc + it, 0)
    )
    assert total == 270

Evaluation is eager: ``map`` runs over every element before ``filter``
sees any of them. Callbacks are invoked once per element, in element
order, on the calling thread.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

from funseq.core.errors import EmptySequenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class _Missing:
    """Sentinel type marking an omitted ``initial`` argument."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


class FunctionalSequence(Sequence[T], Generic[T]):
    """Ordered container of values with chainable map/filter/reduce.

    Parameters
    ----------
    items:
        Initial contents. When ``items`` is another ``FunctionalSequence``
        its elements are deep-copied so the two instances share no
        mutable state. Any other iterable is consumed once and its
        elements are stored in the given order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        if isinstance(items, FunctionalSequence):
            self._items: list[T] = copy.deepcopy(items._items)
        else:
            self._items = list(items)

    @classmethod
    def of(cls, *values: T) -> "FunctionalSequence[T]":
        """Build a sequence from positional literal values."""
        return cls(values)

    @classmethod
    def _wrap(cls, items: list[U]) -> "FunctionalSequence[U]":
        # Takes ownership of a freshly built list without copying it.
        seq: FunctionalSequence[U] = cls.__new__(cls)
        seq._items = items
        return seq

    # ------------------------------------------------------------------
    # Chain operations
    # ------------------------------------------------------------------

    def map(self, transform: Callable[[T], U]) -> "FunctionalSequence[U]":
        """Apply ``transform`` to every element, in order.

        Returns
        -------
        FunctionalSequence
            A new sequence of the same length where
            ``result[i] == transform(self[i])``.
        """
        logger.debug("map over %d element(s) with %r", len(self._items), transform)
        return self._wrap([transform(item) for item in self._items])

    def filter(self, predicate: Callable[[T], object]) -> "FunctionalSequence[T]":
        """Keep the elements for which ``predicate`` is truthy.

        Relative order is preserved and the result is never longer than
        the receiver.
        """
        logger.debug("filter over %d element(s) with %r", len(self._items), predicate)
        return self._wrap([item for item in self._items if predicate(item)])

    def reduce(self, combine: Callable[[T, T], T], initial: T = _MISSING) -> T:
        """Fold the sequence left to right.

        ``acc = initial``, then ``acc = combine(acc, item)`` for every
        item. An empty sequence yields ``initial`` unchanged.

        When ``initial`` is omitted the first element seeds the fold.

        Raises
        ------
        EmptySequenceError
            If ``initial`` is omitted and the sequence is empty.
        """
        items = iter(self._items)
        if initial is _MISSING:
            try:
                acc = next(items)
            except StopIteration:
                raise EmptySequenceError("reduce") from None
        else:
            acc = initial
        for item in items:
            acc = combine(acc, item)
        logger.debug("reduce over %d element(s) -> %r", len(self._items), acc)
        return acc

    # ------------------------------------------------------------------
    # Copy and mutation
    # ------------------------------------------------------------------

    def copy(self) -> "FunctionalSequence[T]":
        """Return an independent deep copy of this sequence."""
        return type(self)(self)

    def __copy__(self) -> "FunctionalSequence[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "FunctionalSequence[T]":
        return self._wrap(copy.deepcopy(self._items, memo))

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        """Add every value from ``values`` at the end, in order."""
        self._items.extend(values)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def to_list(self) -> list[T]:
        """Return the elements as a new plain list."""
        return list(self._items)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "FunctionalSequence[T]": ...

    def __getitem__(self, index: int | slice) -> "T | FunctionalSequence[T]":
        if isinstance(index, slice):
            return self._wrap(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FunctionalSequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FunctionalSequence({self._items!r})"
