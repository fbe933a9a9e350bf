#!/usr/bin/env python3
"""Example: Quickstart: funseq

Build a sequence, chain map/filter/reduce, and print the scalar result.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install funseq
"""
from __future__ import annotations

from funseq import FunctionalSequence

MULTIPLIER = 3
THRESHOLD = 100


def main() -> None:
    tab = FunctionalSequence([10, 20, 30, 40, 50])
    res = (
        tab.map(lambda it: it * MULTIPLIER)
        .filter(lambda it: it > THRESHOLD)
        .reduce(lambda acc, it: acc + it, 0)
    )
    # 270
    print(res)


if __name__ == "__main__":
    main()
