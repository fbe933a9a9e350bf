"""Run a ``PipelineConfig`` against a ``FunctionalSequence``.

Each step's callback is built from the operator registry and applied
with the matching chain method. Errors raised by callbacks propagate
unchanged; the runner never catches them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from funseq.core.sequence import FunctionalSequence
from funseq.operators.builtin import default_registry
from funseq.operators.registry import OperatorKind, OperatorRegistry
from funseq.pipeline.config import PipelineConfig, StepConfig
from funseq.pipeline.errors import PipelineConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Output of one executed step.

    ``output`` is a list for map/filter steps and the folded value for a
    reduce step.
    """

    index: int
    step: StepConfig
    output: Any


@dataclass(frozen=True)
class PipelineResult:
    """Final value of a pipeline run plus per-step outputs."""

    value: Any
    steps: list[StepResult] = field(default_factory=list)


class PipelineRunner:
    """Execute pipeline documents.

    Parameters
    ----------
    registry:
        Operator registry used to resolve step names. Defaults to the
        built-in registry.
    """

    def __init__(self, registry: OperatorRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry

    def run(self, config: PipelineConfig) -> PipelineResult:
        """Apply every step of ``config`` in order.

        Returns
        -------
        PipelineResult
            ``value`` is the reduced scalar when the last step is a
            reduce, otherwise the final sequence as a list.

        Raises
        ------
        OperatorNotFoundError
            If a step names an unknown operator.
        OperatorArgumentError
            If a step's operand does not fit its operator.
        PipelineConfigError
            If a step uses an operator of a different kind.
        """
        current: Any = FunctionalSequence(config.values)
        results: list[StepResult] = []
        for index, step in enumerate(config.steps):
            current = self._apply(index, step, current)
            output = current.to_list() if isinstance(current, FunctionalSequence) else current
            results.append(StepResult(index=index, step=step, output=output))
        value = current.to_list() if isinstance(current, FunctionalSequence) else current
        logger.debug("Pipeline finished after %d step(s) -> %r", len(results), value)
        return PipelineResult(value=value, steps=results)

    def _apply(self, index: int, step: StepConfig, seq: FunctionalSequence[Any]) -> Any:
        spec = self._registry.get(step.fn)
        if spec.kind is not step.op:
            raise PipelineConfigError(
                f"operator {step.fn!r} is a {spec.kind.value} operator "
                f"and cannot be used in a {step.op.value} step",
                index,
            )
        callback = self._registry.build(step.fn, step.arg)
        logger.debug("step %d: %s %s(%r)", index, step.op.value, step.fn, step.arg)
        if step.op is OperatorKind.MAP:
            return seq.map(callback)
        if step.op is OperatorKind.FILTER:
            return seq.filter(callback)
        if step.initial is None:
            return seq.reduce(callback)
        return seq.reduce(callback, step.initial)


def run_pipeline(
    config: PipelineConfig, registry: OperatorRegistry | None = None
) -> PipelineResult:
    """Run ``config`` with a fresh ``PipelineRunner``."""
    return PipelineRunner(registry).run(config)
