"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from gmaint import __version__
from gmaint.core.errors import ErrorCode
from gmaint.core.result import Err, Result
from gmaint.output.console import Style

if TYPE_CHECKING:
    from gmaint.cli.context import CLIContext


T = TypeVar("T")
E = TypeVar("E")


def exit_on_error(
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.MAINTENANCE_ERROR,
) -> None:
    """Exit with error if result is Err, otherwise return.

    Expects error objects to have a 'message' and an optional 'hint' attribute.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))


def show_version(value: bool) -> None:
    """Eager `--version` callback."""
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)
