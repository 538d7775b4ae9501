"""Git repository discovery and maintenance operations."""

from .locator import (
    RepoListError,
    find_git_repos,
    parse_repo_list,
    read_repo_file,
    resolve_repos,
)
from .repository import GitError, Repository, stash_warning

__all__ = [
    # locator
    "RepoListError",
    "find_git_repos",
    "parse_repo_list",
    "read_repo_file",
    "resolve_repos",
    # repository
    "GitError",
    "Repository",
    "stash_warning",
]
