"""Scoped change of the process working directory."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

__all__ = ["EnterDirectoryError", "working_directory"]


class EnterDirectoryError(Exception):
    """`path` could not be made the working directory."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {self.reason}")


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Enter `path` for the duration of the block.

    Failing to enter `path` raises EnterDirectoryError before anything is
    changed. The previous working directory is restored on every exit path;
    an OSError from reading or restoring it propagates unchanged.
    """
    previous = Path.cwd()
    try:
        os.chdir(path)
    except OSError as e:
        raise EnterDirectoryError(path, e) from e
    try:
        yield Path.cwd()
    finally:
        os.chdir(previous)
