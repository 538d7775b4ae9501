from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from gmaint.core.config import Config, load_config, load_config_or_default
from gmaint.core.errors import ErrorCode
from gmaint.core.result import Err
from gmaint.output.console import ConsoleProtocol, RichConsole
from gmaint.platform.paths import default_config_path


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load config and set up the console.

    An explicit `config_path` must exist; the default location is optional.
    """
    console = RichConsole()

    if config_path is not None:
        result = load_config(config_path.expanduser())
    else:
        result = load_config_or_default(default_config_path())

    if isinstance(result, Err):
        console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(config=result.value, console=console)
