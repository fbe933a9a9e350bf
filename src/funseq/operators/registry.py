"""Operator registry for funseq pipelines.

An *operator* is a named factory that produces the callback for one
pipeline step. Factories that take an operand receive it when the step
is built (``multiply`` with operand ``3`` builds ``lambda x: x * 3``);
factories without one are called with no arguments.

Third-party packages can contribute operators by declaring entry-points
in their own ``pyproject.toml`` under the "funseq.operators" group.

Example
-------
Create a registry and register an operator with the decorator::

    from funseq.operators.registry import OperatorKind, OperatorRegistry

    registry = OperatorRegistry("custom")

    @registry.register("square", OperatorKind.MAP, takes_arg=False)
    def square():
        return lambda x: x * x

Build the callback for a step::

    fn = registry.build("square")
    fn(4)  # 16

Load all installed operators via entry-points::

    registry.load_entrypoints("funseq.operators")

An entry-point must resolve to an ``OperatorSpec`` instance.
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

OperatorFactory = Callable[..., Callable[..., Any]]


class OperatorKind(Enum):
    """The pipeline step an operator's callback is shaped for."""

    MAP = "map"
    FILTER = "filter"
    REDUCE = "reduce"


@dataclass(frozen=True)
class OperatorSpec:
    """A registered operator.

    Parameters
    ----------
    name:
        The unique key used in pipeline documents.
    kind:
        Which chain step the produced callback fits.
    factory:
        Callable returning the step callback.
    takes_arg:
        Whether ``factory`` requires an operand.
    description:
        One-line summary shown by ``funseq operators``.
    """

    name: str
    kind: OperatorKind
    factory: OperatorFactory = field(compare=False)
    takes_arg: bool = True
    description: str = ""


class OperatorNotFoundError(KeyError):
    """Raised when a requested operator name is not in the registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.operator_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Operator {name!r} is not registered in the {registry_name!r} registry. "
            "Run 'funseq operators' to list the available names."
        )

    def __str__(self) -> str:
        return str(self.args[0])


class OperatorAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.operator_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Operator {name!r} is already registered in the {registry_name!r} registry. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class OperatorArgumentError(ValueError):
    """Raised when an operand is missing for, or given to, an operator."""

    def __init__(self, name: str, takes_arg: bool) -> None:
        self.operator_name = name
        if takes_arg:
            message = f"Operator {name!r} requires an 'arg' operand."
        else:
            message = f"Operator {name!r} does not accept an 'arg' operand."
        super().__init__(message)


class OperatorRegistry:
    """Registry mapping operator names to ``OperatorSpec`` entries.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._operators: dict[str, OperatorSpec] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        kind: OperatorKind,
        takes_arg: bool = True,
        description: str = "",
    ) -> Callable[[OperatorFactory], OperatorFactory]:
        """Return a decorator that registers the decorated factory.

        The factory is returned unchanged so it stays usable directly.

        Raises
        ------
        OperatorAlreadyRegisteredError
            If ``name`` is already in use in this registry.
        TypeError
            If the decorated object is not callable.
        """

        def decorator(factory: OperatorFactory) -> OperatorFactory:
            self.register_spec(
                OperatorSpec(
                    name=name,
                    kind=kind,
                    factory=factory,
                    takes_arg=takes_arg,
                    description=description or _first_doc_line(factory),
                )
            )
            return factory

        return decorator

    def register_spec(self, spec: OperatorSpec) -> None:
        """Register a prepared ``OperatorSpec``.

        Raises
        ------
        OperatorAlreadyRegisteredError
            If ``spec.name`` is already registered.
        TypeError
            If ``spec`` is not an ``OperatorSpec`` or its factory is not callable.
        """
        if not isinstance(spec, OperatorSpec):
            raise TypeError(f"Cannot register {spec!r}: expected an OperatorSpec.")
        if not callable(spec.factory):
            raise TypeError(
                f"Cannot register {spec.name!r}: factory {spec.factory!r} is not callable."
            )
        if spec.name in self._operators:
            raise OperatorAlreadyRegisteredError(spec.name, self._name)
        self._operators[spec.name] = spec
        logger.debug(
            "Registered %s operator %r in registry %r",
            spec.kind.value,
            spec.name,
            self._name,
        )

    def deregister(self, name: str) -> None:
        """Remove an operator from the registry.

        Raises
        ------
        OperatorNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._operators:
            raise OperatorNotFoundError(name, self._name)
        del self._operators[name]
        logger.debug("Deregistered operator %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> OperatorSpec:
        """Return the ``OperatorSpec`` registered under ``name``.

        Raises
        ------
        OperatorNotFoundError
            If no operator is registered under ``name``.
        """
        try:
            return self._operators[name]
        except KeyError:
            raise OperatorNotFoundError(name, self._name) from None

    def build(self, name: str, arg: Any = None) -> Callable[..., Any]:
        """Return the callback produced by operator ``name``.

        Parameters
        ----------
        name:
            The registered operator name.
        arg:
            The operand for factories that take one; must be ``None``
            otherwise.

        Raises
        ------
        OperatorNotFoundError
            If ``name`` is unknown.
        OperatorArgumentError
            If ``arg`` is missing for, or given to, the operator.
        """
        spec = self.get(name)
        if spec.takes_arg:
            if arg is None:
                raise OperatorArgumentError(name, takes_arg=True)
            return spec.factory(arg)
        if arg is not None:
            raise OperatorArgumentError(name, takes_arg=False)
        return spec.factory()

    def list_operators(self) -> list[str]:
        """Return all registered operator names in alphabetical order."""
        return sorted(self._operators)

    def __iter__(self) -> Iterator[OperatorSpec]:
        """Iterate over registered specs in alphabetical name order."""
        return (self._operators[name] for name in self.list_operators())

    def __contains__(self, name: object) -> bool:
        """Support ``"multiply" in registry`` membership test."""
        return name in self._operators

    def __len__(self) -> int:
        """Return the number of registered operators."""
        return len(self._operators)

    def __repr__(self) -> str:
        return f"OperatorRegistry(name={self._name!r}, operators={self.list_operators()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> None:
        """Discover and register operators declared as package entry-points.

        Each entry-point must resolve to an ``OperatorSpec``; it is
        registered under the spec's own name. Names that are already
        registered are skipped with a debug-level log entry, which makes
        repeated calls idempotent.

        Parameters
        ----------
        group:
            The entry-point group name, e.g. "funseq.operators".

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."funseq.operators"]
            square = "my_package.ops:SQUARE"
        """
        entry_points = importlib.metadata.entry_points(group=group)
        for ep in entry_points:
            if ep.name in self._operators:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                spec = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            if isinstance(spec, OperatorSpec) and self._operators.get(spec.name) is spec:
                logger.debug(
                    "Entry-point %r resolves to operator %r already registered in %r; skipping.",
                    ep.name,
                    spec.name,
                    self._name,
                )
                continue
            try:
                self.register_spec(spec)
            except (OperatorAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )


def _first_doc_line(obj: object) -> str:
    doc = getattr(obj, "__doc__", None) or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""
