from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gmaint.core.config import GitSettings
from gmaint.core.errors import FailureKind
from gmaint.core.result import Err, Ok, Result
from gmaint.git.repository import Repository, stash_warning
from gmaint.output.console import ConsoleProtocol, Style
from gmaint.platform.cwd import EnterDirectoryError, working_directory

NO_REPOS_MESSAGE = "No Git repositories found."

# -----------------------------------------------------------------------------
# Error Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MaintenanceError:
    """Fatal failure while maintaining a repository."""

    repo: Path
    kind: FailureKind
    message: str

    @property
    def hint(self) -> str | None:
        match self.kind:
            case FailureKind.LAUNCH_FAILED:
                return "check that git (and the stash line counter) are installed and on PATH"
            case FailureKind.DIRECTORY_NOT_FOUND:
                return "remove the path from the repository list or fix the typo"
            case FailureKind.PARSE_FAILED:
                return "stash.line_counter must print a single integer"


# -----------------------------------------------------------------------------
# Data Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MaintenanceReport:
    """What happened in one repository.

    Return codes are None in dry-run mode.
    """

    path: Path
    stash_count: int = 0
    gc_returncode: int | None = None
    prune_returncode: int | None = None

    @property
    def has_stashes(self) -> bool:
        return self.stash_count > 0


class MaintenanceService:
    """Run gc, fetch --prune and the stash check on each repository.

    Policy:
    - Repositories are processed one at a time, in the order given.
    - The process working directory is switched into each repository and
      always restored afterwards.
    - A tool exiting non-zero is reported but does not stop the run.
    - The first repository that cannot be entered, or where a command cannot
      be launched or its output parsed, stops the whole run.
    """

    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        git: GitSettings | None = None,
    ) -> None:
        self._console = console
        self._git = git or GitSettings()

    def run(
        self, paths: Sequence[Path], *, dry_run: bool = False
    ) -> Result[list[MaintenanceReport], MaintenanceError]:
        """Maintain every repository, or report that none were found."""
        if not paths:
            self._console.print(NO_REPOS_MESSAGE, Style.ERROR)
            return Ok([])
        return self.maintain_all(paths, dry_run=dry_run)

    def maintain_all(
        self, paths: Sequence[Path], *, dry_run: bool = False
    ) -> Result[list[MaintenanceReport], MaintenanceError]:
        reports: list[MaintenanceReport] = []
        for path in paths:
            result = self.maintain(path, dry_run=dry_run)
            if isinstance(result, Err):
                return result
            reports.append(result.value)
        return Ok(reports)

    def maintain(
        self, path: Path, *, dry_run: bool = False
    ) -> Result[MaintenanceReport, MaintenanceError]:
        self._console.header(f"Maintaining {path}")

        if dry_run:
            self._console.print("  dry-run: gc, fetch --prune, stash list", Style.DIM)
            return Ok(MaintenanceReport(path=path))

        repo = Repository(path, self._git)
        try:
            with working_directory(path):
                result = self._maintain_inside(repo)
        except EnterDirectoryError as e:
            return Err(
                MaintenanceError(
                    repo=path,
                    kind=FailureKind.DIRECTORY_NOT_FOUND,
                    message=f"No such directory: {path} ({e.reason})",
                )
            )

        if isinstance(result, Ok) and result.value.has_stashes:
            self._console.warning(stash_warning(path, result.value.stash_count))
        return result

    def _maintain_inside(self, repo: Repository) -> Result[MaintenanceReport, MaintenanceError]:
        gc = repo.gc()
        if isinstance(gc, Err):
            return Err(MaintenanceError(repo.path, gc.error.kind, gc.error.message))
        self._note_exit("git gc", gc.value)

        prune = repo.fetch_prune()
        if isinstance(prune, Err):
            return Err(MaintenanceError(repo.path, prune.error.kind, prune.error.message))
        self._note_exit("git fetch --prune", prune.value)

        stash = repo.stash_count()
        if isinstance(stash, Err):
            return Err(MaintenanceError(repo.path, stash.error.kind, stash.error.message))

        return Ok(
            MaintenanceReport(
                path=repo.path,
                stash_count=stash.value,
                gc_returncode=gc.value,
                prune_returncode=prune.value,
            )
        )

    def _note_exit(self, command: str, returncode: int) -> None:
        if returncode != 0:
            self._console.print(f"  {command} exited with code {returncode}", Style.DIM)
