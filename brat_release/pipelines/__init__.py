"""Release pipeline definitions and runner."""

from .config import PIPELINES, commit_and_sync, commit_built_files, get_pipeline
from .contracts import ExitStatus, Pipeline, Step, StepFailed
from .runner import PipelineRunner, run_command

__all__ = [
    "PIPELINES",
    "commit_and_sync",
    "commit_built_files",
    "get_pipeline",
    "ExitStatus",
    "Pipeline",
    "Step",
    "StepFailed",
    "PipelineRunner",
    "run_command",
]
