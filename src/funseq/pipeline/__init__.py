"""Declarative pipelines over ``FunctionalSequence``.

Exports the document types, the runner and the config error.
"""
from __future__ import annotations

from funseq.pipeline.config import PipelineConfig, StepConfig
from funseq.pipeline.errors import PipelineConfigError
from funseq.pipeline.runner import PipelineResult, PipelineRunner, StepResult, run_pipeline

__all__ = [
    "PipelineConfig",
    "PipelineConfigError",
    "PipelineResult",
    "PipelineRunner",
    "StepConfig",
    "StepResult",
    "run_pipeline",
]
