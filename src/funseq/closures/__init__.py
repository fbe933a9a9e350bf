"""Closure capture demonstrations.

Exports the three callback builders, the ``CaptureMode`` selector and
``invoke_all``.
"""
from __future__ import annotations

from funseq.closures.capture import (
    CaptureMode,
    callbacks_by_reference,
    callbacks_by_value,
    callbacks_via_factory,
    invoke_all,
    make_callbacks,
)

__all__ = [
    "CaptureMode",
    "callbacks_by_reference",
    "callbacks_by_value",
    "callbacks_via_factory",
    "invoke_all",
    "make_callbacks",
]
