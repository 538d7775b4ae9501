"""Error codes for CLI exit status.

Every fatal maintenance failure (missing directory, git not launchable,
unparsable stash count) shares one exit code; the message printed before
exiting names the repository and the cause.
"""

from enum import IntEnum, StrEnum

__all__ = ["ErrorCode", "FailureKind"]


class ErrorCode(IntEnum):
    """Exit codes for the CLI.

    - 0: Success (including "no repositories found")
    - 1: User error (unreadable repository list, invalid config)
    - 2: Maintenance error (first fatal failure aborts the run)
    """

    OK = 0
    USER_ERROR = 1
    MAINTENANCE_ERROR = 2

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


class FailureKind(StrEnum):
    """Why maintenance of a repository stopped.

    All kinds are fatal; they only differ in the message shown.
    """

    DIRECTORY_NOT_FOUND = "directory-not-found"
    LAUNCH_FAILED = "launch-failed"
    PARSE_FAILED = "parse-failed"
