#!/usr/bin/env python3
"""Example: declarative pipeline: funseq

Load ``demo.yaml`` next to this script, run it, and show each step.

Usage:
    python examples/03_pipeline_config.py
"""
from __future__ import annotations

from pathlib import Path

import funseq
from funseq.pipeline import PipelineConfig


def main() -> None:
    config = PipelineConfig.load(Path(__file__).with_name("demo.yaml"))
    result = funseq.run(config)
    print(f"values: {list(config.values)}")
    for step in result.steps:
        print(f"  {step.index}: {step.step.op.value} {step.step.fn} -> {step.output}")
    print(result.value)


if __name__ == "__main__":
    main()
