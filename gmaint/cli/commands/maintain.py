"""Maintain command - gc, prune and stash check for every repository found."""

from __future__ import annotations

from pathlib import Path

import typer

from gmaint.cli.commands._helpers import exit_on_error, show_version
from gmaint.cli.context import build_context
from gmaint.core.errors import ErrorCode
from gmaint.git.locator import resolve_repos
from gmaint.services.maintenance import MaintenanceService


def maintain(
    path: Path = typer.Argument(
        Path("."),
        help="The root directory to search for repositories (defaults to current directory)",
    ),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Search for repositories recursively"
    ),
    repos: str | None = typer.Option(
        None, "--repos", help="Comma-delimited repository paths (skips the search)"
    ),
    repos_file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="File listing one repository path per line (takes precedence over --repos)",
    ),
    config: Path | None = typer.Option(None, "--config", help="Config file (TOML)"),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="List the repositories without running git"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=show_version,
        is_eager=True,
    ),
) -> None:
    """Perform maintenance on Git repositories."""
    ctx = build_context(config)

    repos_result = resolve_repos(
        path,
        recursive=recursive,
        repos=repos,
        repos_file=repos_file,
        max_depth=ctx.config.scan.max_depth,
    )
    exit_on_error(repos_result, ctx, ErrorCode.USER_ERROR)
    paths = repos_result.unwrap_or([])

    service = MaintenanceService(console=ctx.console, git=ctx.config.git)
    result = service.run(paths, dry_run=dry_run)
    exit_on_error(result, ctx, ErrorCode.MAINTENANCE_ERROR)
