"""Maintenance operations on a single git repository.

Commands run in the current working directory, so the caller enters the
repository first (see `gmaint.platform.cwd.working_directory`). `path` is
only used to name the repository in messages.

Usage:
    repo = Repository(Path("project"))
    with working_directory(repo.path):
        repo.gc()
        repo.fetch_prune()
        match repo.stash_count():
            case Ok(count) if count:
                print(stash_warning(repo.path, count))
            case Err(e):
                print(e.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gmaint.core.config import GitSettings
from gmaint.core.errors import FailureKind
from gmaint.core.result import Err, Ok, Result
from gmaint.platform.process import ProcessError, run_live, run_pipeline

__all__ = [
    "GitError",
    "Repository",
    "stash_warning",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a maintenance operation.

    Attributes:
        command: The git subcommand (e.g. "gc")
        message: Message naming the repository
        kind: Launch failure or unparsable output
    """

    command: str
    message: str
    kind: FailureKind = FailureKind.LAUNCH_FAILED


def stash_warning(repo: Path | str, count: int) -> str:
    """Format the stash warning: "<repo> has N stash entr(y|ies)"."""
    noun = "stash entry" if count == 1 else "stash entries"
    return f"{repo} has {count} {noun}"


class Repository:
    """A working copy to maintain.

    Attributes:
        path: Repository path, as given by the caller
        settings: git executable, gc arguments, remote and line counter
    """

    def __init__(self, path: Path, settings: GitSettings | None = None) -> None:
        self.path = path
        self.settings = settings or GitSettings()

    def gc(self) -> Result[int, GitError]:
        """Run `git gc --aggressive` with output on the terminal.

        Returns:
            Ok(returncode) once git has exited
            Err(GitError) if git could not be launched
        """
        result = self._run(["gc", *self.settings.gc_args])
        return result.map_err(lambda e: self._launch_error("gc", f"Failed to clean {self.path}", e))

    def fetch_prune(self) -> Result[int, GitError]:
        """Run `git fetch --prune [remote]`, dropping stale remote-tracking refs."""
        args = ["fetch", "--prune"]
        if self.settings.remote:
            args.append(self.settings.remote)
        result = self._run(args)
        return result.map_err(
            lambda e: self._launch_error("fetch", f"Failed to prune branches from {self.path}", e)
        )

    def stash_count(self) -> Result[int, GitError]:
        """Count stash entries via `git stash list | wc -l`.

        Returns:
            Ok(count) on success
            Err(GitError) if either command could not be launched or the
            counter printed something other than an integer
        """
        result = run_pipeline(
            [self.settings.executable, "stash", "list"],
            list(self.settings.line_counter),
        )
        if isinstance(result, Err):
            return Err(
                self._launch_error(
                    "stash list",
                    f"Failed to count stash entries on {self.path}",
                    result.error,
                )
            )

        output = result.value.strip()
        try:
            count = int(output)
        except ValueError:
            return Err(
                GitError(
                    command="stash list",
                    message=(
                        f"Failed to count stash entries on {self.path}: "
                        f"unexpected output {output!r}"
                    ),
                    kind=FailureKind.PARSE_FAILED,
                )
            )
        if count < 0:
            return Err(
                GitError(
                    command="stash list",
                    message=f"Failed to count stash entries on {self.path}: negative count {count}",
                    kind=FailureKind.PARSE_FAILED,
                )
            )
        return Ok(count)

    def _run(self, args: list[str]) -> Result[int, ProcessError]:
        return run_live([self.settings.executable, *args])

    def _launch_error(self, command: str, message: str, error: ProcessError) -> GitError:
        detail = error.stderr.strip()
        return GitError(
            command=command,
            message=f"{message}: {detail}" if detail else message,
            kind=FailureKind.LAUNCH_FAILED,
        )
