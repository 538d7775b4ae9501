"""Tests for gmaint.output.console module."""

from __future__ import annotations

import pytest

from gmaint.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.WARNING) == "warning"
        assert str(Style.HEADER) == "header"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_prefixed_helpers(self) -> None:
        console = MockConsole()
        console.error("failed")
        console.warning("stashes")

        assert console.messages == ["error: failed", "warning: stashes"]
        assert console.has_error()
        assert console.has_warning()

    def test_header(self) -> None:
        console = MockConsole()
        console.header("Maintaining repo")

        assert console.count(Style.HEADER) == 1
        assert console.messages == ["Maintaining repo"]
        assert not console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.print("alpha")
        console.print("beta")
        assert [o.message for o in console.find("ph")] == ["alpha"]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("typed")


class TestRichConsole:
    def test_escapes_markup_in_paths(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.header("Maintaining /src/[bold]weird")
        console.warning("/src/[red] has 2 stash entries")

        out = capsys.readouterr().out
        assert "Maintaining /src/[bold]weird" in out
        assert "warning: /src/[red] has 2 stash entries" in out

    def test_plain_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("No Git repositories found.", Style.ERROR)
        assert "No Git repositories found." in capsys.readouterr().out
