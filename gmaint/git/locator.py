"""Repository discovery.

Repositories come from one of three sources, in precedence order:

1. a list file (one path per line)
2. an explicit comma-delimited list
3. a walk of a root directory looking for `.git` directories

Usage:
    from gmaint.git.locator import find_git_repos

    for repo in find_git_repos(Path("~/src").expanduser(), recursive=True):
        print(repo)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from gmaint.core.config import DEFAULT_MAX_DEPTH
from gmaint.core.result import Err, Ok, Result

__all__ = [
    "GIT_DIR_NAME",
    "RepoListError",
    "find_git_repos",
    "parse_repo_list",
    "read_repo_file",
    "resolve_repos",
]

GIT_DIR_NAME = ".git"


@dataclass(frozen=True, slots=True)
class RepoListError:
    """A repository list file could not be read."""

    message: str
    path: Path


def _is_git_dir(path: Path) -> bool:
    # Symlinked metadata dirs are not followed, and `.git` files (worktrees,
    # submodules) are not directories.
    return not path.is_symlink() and path.is_dir()


def find_git_repos(
    root: Path,
    recursive: bool,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Path]:
    """Find working copies beneath root.

    The walk visits entries up to `max_depth` levels below root (root is
    depth 0), or without limit when `recursive` is set. Every `.git`
    directory seen yields its parent. Unreadable directories are skipped.

    Args:
        root: Directory to search
        recursive: Ignore `max_depth` and walk the whole tree
        max_depth: Deepest level at which a `.git` entry is recognised

    Returns:
        Repository paths in traversal order, expressed under `root`
    """
    repos: list[Path] = []
    limit = None if recursive else max_depth

    for dirpath, dirnames, _filenames in os.walk(root, topdown=True, followlinks=False):
        current = Path(dirpath)
        rel = os.path.relpath(dirpath, root)
        depth = 0 if rel == os.curdir else len(Path(rel).parts)

        if GIT_DIR_NAME in dirnames and _is_git_dir(current / GIT_DIR_NAME):
            repos.append(current)

        if limit is not None and depth + 1 >= limit:
            dirnames[:] = []
        else:
            # Nested repositories are separate working copies, so the walk
            # continues into them, but never into the metadata directory.
            dirnames[:] = sorted(d for d in dirnames if d != GIT_DIR_NAME)

    return repos


def parse_repo_list(value: str) -> list[Path]:
    """Split a comma-delimited repository list."""
    return [Path(item.strip()) for item in value.split(",") if item.strip()]


def read_repo_file(path: Path) -> Result[list[Path], RepoListError]:
    """Read repository paths from a file, one per line.

    Blank lines and lines starting with `#` are ignored.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(RepoListError(f"Repository list not found: {path}", path=path))
    except OSError as e:
        return Err(RepoListError(f"Cannot read repository list {path}: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(RepoListError(f"Repository list is not UTF-8 text: {e}", path=path))

    repos: list[Path] = []
    for line in text.splitlines():
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        repos.append(Path(entry))
    return Ok(repos)


def resolve_repos(
    root: Path,
    *,
    recursive: bool = False,
    repos: str | None = None,
    repos_file: Path | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Result[list[Path], RepoListError]:
    """Pick the repository source and produce the ordered path list.

    A list file takes precedence over an explicit list; either one
    bypasses the directory walk.
    """
    if repos_file is not None:
        return read_repo_file(repos_file)
    if repos is not None:
        return Ok(parse_repo_list(repos))
    return Ok(find_git_repos(root, recursive, max_depth=max_depth))
