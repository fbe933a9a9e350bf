"""CLI package.

The ``cli`` sub-package contains the Click application. It imports the
library lazily inside each command so ``funseq --help`` stays fast.
"""
from __future__ import annotations
