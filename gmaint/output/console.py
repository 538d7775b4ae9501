"""Console output for the maintenance run.

MaintenanceService and the CLI only ever emit four kinds of line: plain or
dim notes, `Maintaining <repo>` headers, stash warnings and fatal errors.
RichConsole renders them in the terminal; MockConsole records them for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    DEFAULT = auto()
    ERROR = auto()  # fatal failure, "No Git repositories found."
    WARNING = auto()  # stash entries left behind
    DIM = auto()  # non-zero tool exits, dry-run notes
    HEADER = auto()  # "Maintaining <repo>"

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def error(self, message: str) -> None:
        """Print `error: <message>`."""
        ...

    def warning(self, message: str) -> None:
        """Print `warning: <message>`."""
        ...

    def header(self, message: str) -> None:
        """Print a blank line followed by the repository header."""
        ...


_RICH_STYLES = {
    Style.DEFAULT: "",
    Style.ERROR: "red bold",
    Style.WARNING: "yellow",
    Style.DIM: "dim",
    Style.HEADER: "blue bold",
}


class RichConsole:
    """Terminal console backed by Rich.

    Repository paths may contain `[`, so every message is markup-escaped
    before styling is applied.
    """

    def __init__(self) -> None:
        from rich.console import Console
        from rich.markup import escape

        self._console = Console()
        self._escape = escape

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = _RICH_STYLES[style]
        text = self._escape(message)
        if rich_style:
            self._console.print(text, style=rich_style)
        else:
            self._console.print(text)

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning: {self._escape(message)}[/yellow]")

    def header(self, message: str) -> None:
        self._console.print(f"\n[blue bold]{self._escape(message)}[/blue bold]")


@dataclass
class OutputRecord:
    message: str
    style: Style


@dataclass
class MockConsole:
    """Records every line instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=list)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    def has_error(self) -> bool:
        return self.count(Style.ERROR) > 0

    def has_warning(self) -> bool:
        return self.count(Style.WARNING) > 0

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
