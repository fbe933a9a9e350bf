"""Named operators for declarative pipelines.

``default_registry`` holds the built-ins. Third-party operators register
through ``importlib.metadata`` entry-points under the "funseq.operators"
group.

Example
-------
Declare an operator in pyproject.toml:

.. code-block:: toml

    [project.entry-points."funseq.operators"]
    square = "my_package.ops:SQUARE"
"""
from __future__ import annotations

from funseq.operators.builtin import default_registry
from funseq.operators.registry import (
    OperatorAlreadyRegisteredError,
    OperatorArgumentError,
    OperatorKind,
    OperatorNotFoundError,
    OperatorRegistry,
    OperatorSpec,
)

ENTRYPOINT_GROUP = "funseq.operators"

__all__ = [
    "ENTRYPOINT_GROUP",
    "OperatorAlreadyRegisteredError",
    "OperatorArgumentError",
    "OperatorKind",
    "OperatorNotFoundError",
    "OperatorRegistry",
    "OperatorSpec",
    "default_registry",
]
