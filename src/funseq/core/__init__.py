"""Core domain logic.

Holds the ``FunctionalSequence`` container and the errors it raises.
Submodules in core/ should not import from operators/, pipeline/ or cli/.
"""
from __future__ import annotations

from funseq.core.errors import EmptySequenceError
from funseq.core.sequence import FunctionalSequence

__all__ = ["FunctionalSequence", "EmptySequenceError"]
