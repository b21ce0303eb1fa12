from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CommitMessage:
    subject: str
    body: tuple[str, ...] = ()

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

    def to_args(self) -> list[str]:
        """One -m flag per paragraph; git joins them with blank lines."""
        args = ["-m", self.subject]
        for paragraph in self.body:
            args.extend(["-m", paragraph])
        return args

    @classmethod
    def timestamped(cls, prefix: str, now: datetime) -> "CommitMessage":
        return cls(subject=f"{prefix} ({now.strftime(cls.TIMESTAMP_FORMAT)})")
