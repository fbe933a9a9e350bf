"""Error types for pipeline documents."""
from __future__ import annotations


class PipelineConfigError(ValueError):
    """Raised when a pipeline document is malformed.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    step_index:
        Zero-based index of the offending step, when the problem is
        local to one step.
    """

    def __init__(self, message: str, step_index: int | None = None) -> None:
        self.message = message
        self.step_index = step_index
        if step_index is not None:
            message = f"step {step_index}: {message}"
        super().__init__(message)
