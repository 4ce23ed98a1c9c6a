"""Process boundary for invoking external command-line tools."""

import subprocess
from abc import ABC, abstractmethod
from typing import NamedTuple


class CommandResult(NamedTuple):
    """Raw outcome of an external command."""

    exit_code: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        """Check whether the command exited with status zero.

        Returns:
            True if the exit status is zero
        """
        return self.exit_code == 0


class CommandRunner(ABC):
    """Runs an argument vector to completion and captures its output."""

    @abstractmethod
    def run(self, cmd: list[str]) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            cmd: The command to execute, as a list of strings

        Returns:
            A CommandResult with the exit status and raw output streams

        Raises:
            OSError: If the process cannot be spawned
        """


class SubprocessRunner(CommandRunner):
    """Runs commands with :func:`subprocess.run`, blocking until they exit."""

    def run(self, cmd: list[str]) -> CommandResult:
        completed = subprocess.run(  # noqa: S603
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
        )


def decode_output(data: bytes) -> str:
    """Decode captured output as UTF-8, replacing invalid byte sequences."""
    return data.decode("utf-8", errors="replace")
