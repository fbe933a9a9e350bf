"""Shared test fixtures for funseq.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
module-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from funseq.core import FunctionalSequence

DEMO_YAML = """\
values: [10, 20, 30, 40, 50]
steps:
  - {op: map, fn: multiply, arg: 3}
  - {op: filter, fn: greater_than, arg: 100}
  - {op: reduce, fn: add, initial: 0}
"""


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def demo_sequence() -> FunctionalSequence[int]:
    """The five-element sequence used by the demo pipeline."""
    return FunctionalSequence([10, 20, 30, 40, 50])


@pytest.fixture()
def demo_yaml_path(tmp_path: Path) -> Path:
    """Write the demo pipeline as YAML and return its path."""
    path = tmp_path / "demo.yaml"
    path.write_text(DEMO_YAML, encoding="utf-8")
    return path
