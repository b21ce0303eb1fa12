"""Fail-fast git release pipelines for a BRAT-distributed Obsidian plugin."""

from .pipelines import (
    ExitStatus,
    Pipeline,
    PipelineRunner,
    Step,
    StepFailed,
    commit_and_sync,
    commit_built_files,
)

__version__ = "2.0.0"

__all__ = [
    "ExitStatus",
    "Pipeline",
    "PipelineRunner",
    "Step",
    "StepFailed",
    "commit_and_sync",
    "commit_built_files",
]
