"""Subprocess execution with Result-based error handling.

Only a failure to *launch* a command is an error here. A command that runs
and exits non-zero still yields Ok; callers decide what a non-zero exit
means.

Usage:
    match run_live(["git", "gc", "--aggressive"]):
        case Ok(returncode):
            ...
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from gmaint.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_live", "run_pipeline"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a subprocess that could not be started.

    Attributes:
        command: The command that was executed.
        returncode: -1 when the process never started.
        stdout: Standard output (may be empty).
        stderr: Error details.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def _launch_error(cmd: list[str], error: OSError) -> ProcessError:
    return ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(error))


def run_live(cmd: list[str]) -> Result[int, ProcessError]:
    """Run a command in the current directory with stdout/stderr inherited.

    Returns:
        Ok(returncode) once the process has exited,
        Err(ProcessError) if it could not be started.
    """
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as e:
        return Err(_launch_error(cmd, e))
    return Ok(proc.returncode)


def run_pipeline(producer: list[str], consumer: list[str]) -> Result[str, ProcessError]:
    """Run `producer | consumer` in the current directory.

    The consumer's stdout is captured; stderr of both commands goes to the
    terminal.

    Returns:
        Ok(stdout of consumer), or Err(ProcessError) if either command
        could not be started.
    """
    try:
        upstream = subprocess.Popen(producer, stdout=subprocess.PIPE)
    except OSError as e:
        return Err(_launch_error(producer, e))

    with upstream:
        try:
            proc = subprocess.run(
                consumer,
                stdin=upstream.stdout,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            upstream.kill()
            return Err(_launch_error(consumer, e))
        # Drop our read end so a producer still writing gets SIGPIPE once the
        # consumer has exited.
        if upstream.stdout is not None:
            upstream.stdout.close()

    return Ok(proc.stdout)
