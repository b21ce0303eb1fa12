"""Data contracts for release pipelines."""

from dataclasses import dataclass
from enum import Enum


class ExitStatus(Enum):
    """Overall outcome of a pipeline run."""
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def exit_code(self) -> int:
        return 0 if self is ExitStatus.SUCCESS else 1


@dataclass(frozen=True)
class Step:
    """One external command and what to say when it fails."""
    name: str
    label: str
    command: tuple[str, ...]
    on_failure_message: str
    halts_pipeline_on_failure: bool = True

    def __post_init__(self) -> None:
        if not self.halts_pipeline_on_failure:
            raise ValueError(f"Step '{self.name}' must halt the pipeline on failure")


@dataclass(frozen=True)
class Pipeline:
    """Ordered steps executed until the first failure."""
    name: str
    description: str
    steps: tuple[Step, ...]
    success_message: str
    next_action: str | None = None

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError(f"Pipeline '{self.name}' has no steps")

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]


class StepFailed(RuntimeError):
    """Raised when a step exits non-zero or cannot be started."""

    def __init__(self, step_name: str, upstream_exit_status: int | None) -> None:
        self.step_name = step_name
        self.upstream_exit_status = upstream_exit_status
        if upstream_exit_status is None:
            detail = "could not be started"
        else:
            detail = f"exited with status {upstream_exit_status}"
        super().__init__(f"Step '{step_name}' {detail}")
