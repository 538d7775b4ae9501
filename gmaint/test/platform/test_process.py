"""Tests for gmaint.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from gmaint.core.result import Err, Ok
from gmaint.platform.process import ProcessError, run_live, run_pipeline

PY = sys.executable
COUNT_LINES = [PY, "-c", "import sys; print(len(sys.stdin.readlines()))"]
HAS_MARKER = "import os, sys; sys.exit(0 if os.path.exists('marker.txt') else 1)"


class TestProcessError:
    """Test ProcessError dataclass."""

    def test_str_short_command(self) -> None:
        error = ProcessError(command=("git", "gc"), returncode=-1, stdout="", stderr="")
        assert str(error) == "git gc failed (exit -1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("git", "fetch", "--prune", "origin"), returncode=-1, stdout="", stderr=""
        )
        assert str(error) == "git fetch --prune ... failed (exit -1)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]



class TestRunLive:
    """Test run_live function."""

    def test_success_returns_zero(self) -> None:
        assert run_live([PY, "-c", "pass"]) == Ok(0)

    def test_nonzero_exit_is_ok(self) -> None:
        result = run_live([PY, "-c", "import sys; sys.exit(3)"])
        assert result == Ok(3)

    def test_command_not_found(self) -> None:
        result = run_live(["nonexistent_command_12345"])

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.command == ("nonexistent_command_12345",)
        assert len(result.error.stderr) > 0

    def test_runs_in_current_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "marker.txt").write_text("x")
        monkeypatch.chdir(tmp_path)

        assert run_live([PY, "-c", HAS_MARKER]) == Ok(0)


class TestRunPipeline:
    """Test run_pipeline function."""

    def test_counts_producer_lines(self) -> None:
        result = run_pipeline([PY, "-c", "print('a'); print('b')"], COUNT_LINES)

        assert isinstance(result, Ok)
        assert result.value.strip() == "2"

    def test_empty_producer(self) -> None:
        result = run_pipeline([PY, "-c", "pass"], COUNT_LINES)

        assert isinstance(result, Ok)
        assert result.value.strip() == "0"

    def test_failing_producer_still_counts(self) -> None:
        result = run_pipeline([PY, "-c", "import sys; sys.exit(128)"], COUNT_LINES)

        assert isinstance(result, Ok)
        assert result.value.strip() == "0"

    def test_consumer_exiting_without_reading(self) -> None:
        """A producer writing past the pipe buffer must not block the pipeline."""
        result = run_pipeline([PY, "-c", "print('x' * 1_000_000)"], [PY, "-c", "print(0)"])

        assert isinstance(result, Ok)
        assert result.value.strip() == "0"

    def test_runs_in_current_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "marker.txt").write_text("x")
        monkeypatch.chdir(tmp_path)
        list_dir = "import os; print('\\n'.join(os.listdir()))"

        result = run_pipeline([PY, "-c", list_dir], COUNT_LINES)

        assert isinstance(result, Ok)
        assert result.value.strip() == "1"

    def test_producer_not_found(self) -> None:
        result = run_pipeline(["nonexistent_command_12345"], COUNT_LINES)

        assert isinstance(result, Err)
        assert result.error.command == ("nonexistent_command_12345",)

    def test_consumer_not_found(self) -> None:
        result = run_pipeline([PY, "-c", "print('a')"], ["nonexistent_command_12345", "-l"])

        assert isinstance(result, Err)
        assert result.error.command == ("nonexistent_command_12345", "-l")
        assert result.error.returncode == -1
