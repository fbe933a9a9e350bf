"""funseq: chainable map/filter/reduce sequences and closure capture demos.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import funseq

    seq = funseq.FunctionalSequence([10, 20, 30, 40, 50])
    total = (
        seq.map(lambda it: it * 3)
        .filter(lambda it: it > 100)
        .reduce(lambda acc, it: acc + it, 0)
    )
    # 270

    # The same chain, declared as data
    funseq.run_demo()
    # 270

    # Closure capture semantics
    funseq.capture("value")
    # [0, 1, 2, 3]
    funseq.capture("reference")
    # [4, 4, 4, 4]

    funseq.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from funseq.core import EmptySequenceError, FunctionalSequence

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from funseq.closures.capture import CaptureMode
    from funseq.pipeline.config import PipelineConfig
    from funseq.pipeline.runner import PipelineResult


def run(config: "PipelineConfig") -> "PipelineResult":
    """Run a pipeline document with the built-in operators.

    Parameters
    ----------
    config:
        The pipeline to execute.

    Returns
    -------
    PipelineResult
        The final value and the output of every step.

    Raises
    ------
    funseq.pipeline.PipelineConfigError
        If a step uses an operator of the wrong kind.
    funseq.operators.OperatorNotFoundError
        If a step names an unknown operator.
    """
    from funseq.pipeline.runner import run_pipeline

    return run_pipeline(config)


def run_demo() -> Any:
    """Run the demo pipeline and return its result.

    The demo triples ``[10, 20, 30, 40, 50]``, keeps values above 100
    and sums them, giving ``270``.
    """
    from funseq.pipeline.config import PipelineConfig

    return run(PipelineConfig.default()).value


def capture(mode: "CaptureMode | str", count: int = 4) -> list[int]:
    """Build callbacks with the given capture strategy and call them.

    Parameters
    ----------
    mode:
        ``"value"``, ``"reference"`` or ``"factory"``.
    count:
        How many callbacks the loop creates.

    Returns
    -------
    list[int]
        What each callback returned, in creation order.
    """
    from funseq.closures.capture import invoke_all, make_callbacks

    return invoke_all(make_callbacks(mode, count))


__all__ = [
    "__version__",
    "EmptySequenceError",
    "FunctionalSequence",
    "capture",
    "run",
    "run_demo",
]
