from collections.abc import Sequence

from .commit_message import CommitMessage


class GitCommands:
    """Builds git argument vectors. Nothing here runs a process."""

    GIT = "git"

    def stage_all(self) -> tuple[str, ...]:
        return (self.GIT, "add", ".")

    def stage_files(self, paths: Sequence[str]) -> tuple[str, ...]:
        if not paths:
            raise ValueError("stage_files needs at least one path")
        return (self.GIT, "add", *paths)

    def commit(self, message: CommitMessage) -> tuple[str, ...]:
        return (self.GIT, "commit", *message.to_args())

    def push_branch(self, remote: str, branch: str) -> tuple[str, ...]:
        return (self.GIT, "push", remote, branch)

    def create_tag(self, tag: str, message: str) -> tuple[str, ...]:
        return (self.GIT, "tag", "-a", tag, "-m", message)

    def push_tag(self, remote: str, tag: str) -> tuple[str, ...]:
        return (self.GIT, "push", remote, tag)
