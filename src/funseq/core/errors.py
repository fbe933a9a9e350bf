"""Error types raised by the sequence container itself.

Failures raised by user-supplied callbacks are never wrapped; they reach
the caller unchanged. The types here cover the few conditions the
container detects on its own.
"""
from __future__ import annotations


class EmptySequenceError(ValueError):
    """Raised when folding an empty sequence without an initial value."""

    def __init__(self, operation: str = "reduce") -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation} an empty sequence without an initial value. "
            "Pass 'initial' to define the result for empty input."
        )
