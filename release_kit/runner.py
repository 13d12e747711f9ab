"""
External command execution.

Everything the tools do to git or the content exporter goes through a
``CommandRunner`` so tests can swap in a fake.
"""

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence


class CommandError(RuntimeError):
    """Raised when a required external command fails."""

    def __init__(self, args: Sequence[str], returncode: int | None = None, detail: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.detail = detail.strip()

        message = f"Command failed: {shlex.join(self.args_list)}"
        if returncode is not None:
            message += f" (exit {returncode})"
        if self.detail:
            message += f"\n{self.detail}"
        super().__init__(message)


@dataclass(frozen=True)
class CommandResult:
    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def check(self) -> "CommandResult":
        """Return self, or raise CommandError if the command exited non-zero."""
        if not self.ok:
            raise CommandError(self.args, self.returncode, self.stderr)
        return self


class CommandRunner(Protocol):
    def run(self, command: str | Sequence[str], capture: bool = True) -> CommandResult:
        ...


def split_command(command: str | Sequence[str]) -> list[str]:
    """Turn a command line string into an argument list."""
    if isinstance(command, str):
        return shlex.split(command)
    return list(command)


class SubprocessRunner:
    """
    Run commands as blocking child processes.

    Args:
        cwd: Working directory for every command.
    """

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def run(self, command: str | Sequence[str], capture: bool = True) -> CommandResult:
        """
        Run a command and wait for it to exit.

        Args:
            command: Argument list, or a command line split with shell rules.
            capture: Collect stdout/stderr as text. When False the child
                inherits this process's standard streams.

        Returns:
            The CommandResult. A non-zero exit is not raised here.

        Raises:
            CommandError: If the executable cannot be started.
        """
        args = split_command(command)
        if not args:
            raise CommandError(args, detail="Empty command")

        try:
            proc = subprocess.run(
                args,
                cwd=str(self.cwd) if self.cwd else None,
                capture_output=capture,
                text=True,
                check=False,
            )
        except OSError as e:
            raise CommandError(args, detail=str(e)) from e

        return CommandResult(
            args=args,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
