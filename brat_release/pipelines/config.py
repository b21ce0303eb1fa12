"""Release pipeline definitions."""

from collections.abc import Callable
from datetime import datetime

from .. import constants
from ..git import CommitMessage, GitCommands
from .contracts import Pipeline, Step

RELEASE_MESSAGE = CommitMessage(
    subject=constants.RELEASE_SUBJECT,
    body=constants.RELEASE_BODY,
)


def commit_and_sync() -> Pipeline:
    """Stage everything, commit the release, push it and publish the tag."""
    git = GitCommands()
    target = f"{constants.REMOTE}/{constants.BRANCH}"
    return Pipeline(
        name="sync",
        description="Commit all changes, push, and tag the release",
        steps=(
            Step(
                name="stage",
                label="Staging all changes...",
                command=git.stage_all(),
                on_failure_message="ERROR: Failed to stage changes.",
            ),
            Step(
                name="commit",
                label="Committing release...",
                command=git.commit(RELEASE_MESSAGE),
                on_failure_message="ERROR: Commit failed. Is there anything to commit?",
            ),
            Step(
                name="push-branch",
                label=f"Pushing to {target}...",
                command=git.push_branch(constants.REMOTE, constants.BRANCH),
                on_failure_message=f"ERROR: Failed to push to {target}.",
            ),
            Step(
                name="tag",
                label=f"Creating tag {constants.TAG}...",
                command=git.create_tag(constants.TAG, constants.TAG_MESSAGE),
                on_failure_message=f"ERROR: Failed to create tag {constants.TAG}. Does it already exist?",
            ),
            Step(
                name="push-tag",
                label=f"Pushing tag {constants.TAG}...",
                command=git.push_tag(constants.REMOTE, constants.TAG),
                on_failure_message=f"ERROR: Failed to push tag {constants.TAG}.",
            ),
        ),
        success_message=f"SUCCESS: {constants.TAG} committed, pushed and tagged.",
        next_action=(
            f"Next: create a GitHub release for {constants.TAG} and attach "
            f"{', '.join(constants.BUILD_FILES)} so BRAT can install it."
        ),
    )


def commit_built_files(now: datetime | None = None) -> Pipeline:
    """Commit the build output BRAT installs from and push it."""
    git = GitCommands()
    if now is None:
        now = datetime.now()
    target = f"{constants.REMOTE}/{constants.BRANCH}"
    files = list(constants.BUILD_FILES)
    return Pipeline(
        name="build",
        description="Commit built plugin files and push",
        steps=(
            Step(
                name="stage",
                label=f"Staging {', '.join(files)}...",
                command=git.stage_files(files),
                on_failure_message="ERROR: Failed to stage build files. Did the build run?",
            ),
            Step(
                name="commit",
                label="Committing build files...",
                command=git.commit(
                    CommitMessage.timestamped(constants.BUILD_COMMIT_PREFIX, now)
                ),
                on_failure_message="ERROR: Commit failed. Are the built files unchanged?",
            ),
            Step(
                name="push-branch",
                label=f"Pushing to {target}...",
                command=git.push_branch(constants.REMOTE, constants.BRANCH),
                on_failure_message=f"ERROR: Failed to push to {target}.",
            ),
        ),
        success_message="SUCCESS: Built files committed and pushed.",
        next_action="Next: run the sync pipeline to tag the release.",
    )


PIPELINES: dict[str, Callable[[], Pipeline]] = {
    "sync": commit_and_sync,
    "build": commit_built_files,
}


def get_pipeline(name: str) -> Pipeline:
    try:
        builder = PIPELINES[name]
    except KeyError:
        known = ", ".join(sorted(PIPELINES))
        raise KeyError(f"Unknown pipeline '{name}' (known: {known})") from None
    return builder()
