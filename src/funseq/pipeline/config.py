"""Pipeline documents.

A pipeline document lists the starting values and the chain of steps to
apply to them. It can be written as YAML or JSON::

    values: [10, 20, 30, 40, 50]
    steps:
      - {op: map, fn: multiply, arg: 3}
      - {op: filter, fn: greater_than, arg: 100}
      - {op: reduce, fn: add, initial: 0}

``op`` is one of ``map``, ``filter`` or ``reduce``; ``fn`` names a
registered operator; ``arg`` is the operand bound into it. ``initial``
seeds a ``reduce`` step; without it the first element is used. A
``reduce`` step produces a scalar and must therefore be the last step.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from funseq.operators.registry import OperatorKind
from funseq.pipeline.errors import PipelineConfigError

_STEP_KEYS = frozenset({"op", "fn", "arg", "initial"})
_DOCUMENT_KEYS = frozenset({"values", "steps"})


@dataclass(frozen=True)
class StepConfig:
    """One chain step of a pipeline.

    Parameters
    ----------
    op:
        Which chain operation to apply.
    fn:
        Name of the registered operator producing the callback.
    arg:
        Operand for the operator, or ``None``.
    initial:
        Seed for a ``reduce`` step, or ``None`` to seed from the first
        element.
    """

    op: OperatorKind
    fn: str
    arg: Any = None
    initial: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"op": self.op.value, "fn": self.fn}
        if self.arg is not None:
            data["arg"] = self.arg
        if self.initial is not None:
            data["initial"] = self.initial
        return data

    @classmethod
    def from_dict(cls, data: object, index: int) -> "StepConfig":
        if not isinstance(data, dict):
            raise PipelineConfigError(
                f"expected a mapping, got {type(data).__name__}", index
            )
        unknown = set(data) - _STEP_KEYS
        if unknown:
            raise PipelineConfigError(
                f"unknown key(s): {', '.join(sorted(map(str, unknown)))}", index
            )
        try:
            op = OperatorKind(data.get("op"))
        except ValueError:
            raise PipelineConfigError(
                f"'op' must be one of map, filter, reduce; got {data.get('op')!r}",
                index,
            ) from None
        fn = data.get("fn")
        if not isinstance(fn, str) or not fn:
            raise PipelineConfigError("'fn' must be a non-empty operator name", index)
        initial = data.get("initial")
        if initial is not None and op is not OperatorKind.REDUCE:
            raise PipelineConfigError("'initial' is only valid on a reduce step", index)
        return cls(op=op, fn=fn, arg=data.get("arg"), initial=initial)


@dataclass(frozen=True)
class PipelineConfig:
    """Starting values plus the ordered chain of steps."""

    values: tuple[Any, ...] = ()
    steps: tuple[StepConfig, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for index, step in enumerate(self.steps[:-1]):
            if step.op is OperatorKind.REDUCE:
                raise PipelineConfigError(
                    "reduce produces a single value and must be the last step",
                    index,
                )

    @classmethod
    def default(cls) -> "PipelineConfig":
        """The demo pipeline: triple, keep values over 100, sum."""
        return cls(
            values=(10, 20, 30, 40, 50),
            steps=(
                StepConfig(OperatorKind.MAP, "multiply", arg=3),
                StepConfig(OperatorKind.FILTER, "greater_than", arg=100),
                StepConfig(OperatorKind.REDUCE, "add", initial=0),
            ),
        )

    # ------------------------------------------------------------------
    # dict
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "values": list(self.values),
            "steps": [step.to_dict() for step in self.steps],
        }

    @classmethod
    def from_dict(cls, data: object) -> "PipelineConfig":
        """Build and validate a config from a parsed document.

        Raises
        ------
        PipelineConfigError
            If the document does not describe a valid pipeline.
        """
        if not isinstance(data, dict):
            raise PipelineConfigError(
                f"pipeline document must be a mapping, got {type(data).__name__}"
            )
        unknown = set(data) - _DOCUMENT_KEYS
        if unknown:
            raise PipelineConfigError(
                f"unknown top-level key(s): {', '.join(sorted(map(str, unknown)))}"
            )
        values = data.get("values", [])
        if not isinstance(values, list):
            raise PipelineConfigError("'values' must be a list")
        raw_steps = data.get("steps", [])
        if not isinstance(raw_steps, list):
            raise PipelineConfigError("'steps' must be a list")
        steps = tuple(StepConfig.from_dict(raw, i) for i, raw in enumerate(raw_steps))
        return cls(values=tuple(values), steps=steps)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "PipelineConfig":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PipelineConfigError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> "PipelineConfig":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise PipelineConfigError(f"invalid YAML: {exc}") from exc
        return cls.from_dict(data)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> "PipelineConfig":
        """Read a pipeline document from ``path``.

        Files ending in ``.json`` are parsed as JSON; everything else as
        YAML, which also accepts plain JSON.

        Raises
        ------
        OSError
            If the file cannot be read.
        PipelineConfigError
            If the document is malformed or is not valid UTF-8.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PipelineConfigError(f"file is not valid UTF-8: {exc}") from exc
        if path.suffix.lower() == ".json":
            return cls.from_json(text)
        return cls.from_yaml(text)
