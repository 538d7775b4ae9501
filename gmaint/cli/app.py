from __future__ import annotations

import typer

from gmaint.cli.commands.maintain import maintain


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)

# Single command: Typer runs it directly, so `git-maint PATH -r` works
# without a subcommand name.
app.command()(maintain)


def main() -> None:
    app()
