from .commit_message import CommitMessage
from .commands import GitCommands

__all__ = [
    "CommitMessage",
    "GitCommands",
]
