"""Tests for the release pipeline definitions."""

import re
from datetime import datetime

import pytest

from brat_release import constants
from brat_release.pipelines import (
    PIPELINES,
    Pipeline,
    Step,
    commit_and_sync,
    commit_built_files,
    get_pipeline,
)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 14, 30, 0)


class TestCommitAndSync:
    def test_has_five_steps_in_order(self) -> None:
        pipeline = commit_and_sync()
        assert pipeline.step_names == ["stage", "commit", "push-branch", "tag", "push-tag"]

    def test_commands(self) -> None:
        commands = [step.command for step in commit_and_sync().steps]
        assert commands[0] == ("git", "add", ".")
        assert commands[1][:2] == ("git", "commit")
        assert commands[2] == ("git", "push", "origin", "main")
        assert commands[3][:4] == ("git", "tag", "-a", "v2.0.0")
        assert commands[4] == ("git", "push", "origin", "v2.0.0")

    def test_commit_has_subject_plus_body_flags(self) -> None:
        commit = commit_and_sync().steps[1].command
        assert commit.count("-m") == len(constants.RELEASE_BODY) + 1
        assert commit[3] == constants.RELEASE_SUBJECT

    def test_commit_keeps_blank_separators(self) -> None:
        commit = commit_and_sync().steps[1].command
        assert "" in commit

    def test_every_step_halts_on_failure(self) -> None:
        assert all(step.halts_pipeline_on_failure for step in commit_and_sync().steps)

    def test_construction_is_repeatable(self) -> None:
        assert commit_and_sync() == commit_and_sync()


class TestCommitBuiltFiles:
    def test_has_three_steps_in_order(self, now: datetime) -> None:
        pipeline = commit_built_files(now)
        assert pipeline.step_names == ["stage", "commit", "push-branch"]

    def test_stages_build_files(self, now: datetime) -> None:
        stage = commit_built_files(now).steps[0]
        assert stage.command == ("git", "add", "main.js", "styles.css", "manifest.json")

    def test_commit_message_embeds_timestamp(self, now: datetime) -> None:
        commit = commit_built_files(now).steps[1].command
        assert commit[:3] == ("git", "commit", "-m")
        assert "2026-10-19 14:30:00" in commit[3]

    def test_push_branch(self, now: datetime) -> None:
        assert commit_built_files(now).steps[2].command == ("git", "push", "origin", "main")

    def test_construction_is_repeatable(self, now: datetime) -> None:
        assert commit_built_files(now).steps == commit_built_files(now).steps

    def test_defaults_to_current_time(self) -> None:
        commit = commit_built_files().steps[1].command
        assert re.search(r"\(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\)$", commit[3])


class TestRegistry:
    def test_known_pipelines(self) -> None:
        assert set(PIPELINES) == {"sync", "build"}

    @pytest.mark.parametrize("name", ["sync", "build"])
    def test_get_pipeline_builds_by_name(self, name: str) -> None:
        pipeline = get_pipeline(name)
        assert isinstance(pipeline, Pipeline)
        assert pipeline.name == name

    def test_unknown_pipeline_lists_known_names(self) -> None:
        with pytest.raises(KeyError, match="build, sync"):
            get_pipeline("deploy")

    def test_empty_pipeline_rejected(self) -> None:
        with pytest.raises(ValueError):
            Pipeline(name="empty", description="", steps=(), success_message="")

    def test_step_that_does_not_halt_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="must halt"):
            Step(
                name="stage",
                label="Staging...",
                command=("git", "add", "."),
                on_failure_message="ERROR",
                halts_pipeline_on_failure=False,
            )
