"""Fail-fast release pipeline execution."""

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from .contracts import ExitStatus, Pipeline, Step, StepFailed

logger = logging.getLogger(__name__)

Executor = Callable[[Sequence[str], Path], int]

ACKNOWLEDGE_PROMPT = "Press Enter to close..."


def run_command(command: Sequence[str], cwd: Path) -> int:
    """Run a command in the foreground and return its exit status.

    Output goes straight to the console. There is no timeout: a hung
    command hangs the pipeline.
    """
    result = subprocess.run(list(command), cwd=cwd)
    return result.returncode


class PipelineRunner:
    """Runs a pipeline's steps in order and stops at the first failure."""

    def __init__(
        self,
        project_path: Path,
        pause: bool = True,
        executor: Executor | None = None,
        prompt: Callable[[str], str] | None = None,
        out: Callable[[str], None] = print,
    ) -> None:
        self.project_path = project_path
        self.pause = pause
        self.executor = executor or run_command
        self.prompt = prompt or input
        self.out = out
        self.executed: list[str] = []
        self.failure: StepFailed | None = None

    def run(self, pipeline: Pipeline) -> ExitStatus:
        self.executed = []
        self.failure = None

        logger.info(f"Running pipeline '{pipeline.name}' in {self.project_path}")

        for step in pipeline.steps:
            try:
                self._run_step(step)
            except StepFailed as e:
                self.failure = e
                logger.error(str(e))
                self.out(step.on_failure_message)
                self._acknowledge()
                return ExitStatus.FAILURE

        self.out("")
        self.out(pipeline.success_message)
        if pipeline.next_action:
            self.out(pipeline.next_action)
        return ExitStatus.SUCCESS

    def _run_step(self, step: Step) -> None:
        self.out(step.label)
        self.executed.append(step.name)
        logger.debug(f"[{step.name}] {shlex.join(step.command)}")

        try:
            status = self.executor(step.command, self.project_path)
        except OSError as e:
            logger.debug(f"[{step.name}] failed to start {step.command[0]}: {e}")
            raise StepFailed(step.name, None) from e

        logger.debug(f"[{step.name}] exit status {status}")
        if status != 0:
            raise StepFailed(step.name, status)

    def _acknowledge(self) -> None:
        if not self.pause:
            return
        try:
            self.prompt(f"\n{ACKNOWLEDGE_PROMPT}")
        except EOFError:
            pass
