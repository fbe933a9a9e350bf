#!/usr/bin/env python3
"""Example: closure capture: funseq

Create four callbacks in a loop and call them afterwards. With a
per-iteration copy of the counter they print 0, 1, 2, 3; sharing the
loop variable they all print 4.

Usage:
    python examples/02_closures.py
"""
from __future__ import annotations

from funseq.closures import CaptureMode, invoke_all, make_callbacks


def main() -> None:
    for mode in (CaptureMode.VALUE, CaptureMode.REFERENCE):
        for value in invoke_all(make_callbacks(mode, 4)):
            print(value)


if __name__ == "__main__":
    main()
