"""Blocking execution of external commands."""

import subprocess
from dataclasses import dataclass

from .exceptions import CommandFailedError
from .logging_config import get_logger

logger = get_logger("release_tools.executor")

# Shell convention for "command not found"
NOT_FOUND_RETURN_CODE = 127


@dataclass
class CommandResult:
    """Result of executing an external command."""

    stdout: str
    stderr: str
    return_code: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.return_code == 0

    @property
    def output(self) -> str:
        """Get combined output, preferring stdout."""
        return self.stdout if self.stdout else self.stderr


class CommandExecutor:
    """Run external commands synchronously, one at a time."""

    def run(self, command: list[str], capture: bool = True) -> CommandResult:
        """
        Execute a command and wait for it to exit.

        Args:
            command: Command and arguments (no shell)
            capture: Capture stdout/stderr; when False the child inherits
                this process's streams so its output reaches the terminal

        Returns:
            CommandResult with stdout, stderr, return code
        """
        logger.debug(f"Running: {' '.join(command)}")

        try:
            if capture:
                completed = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                )
            else:
                completed = subprocess.run(command)
        except FileNotFoundError as e:
            logger.warning(f"Executable not found: {command[0]}")
            return CommandResult(
                stdout="",
                stderr=str(e),
                return_code=NOT_FOUND_RETURN_CODE,
            )

        return CommandResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            return_code=completed.returncode,
        )

    def check(self, command: list[str], capture: bool = True) -> CommandResult:
        """Run a command and raise CommandFailedError on a non-zero exit."""
        result = self.run(command, capture=capture)
        if not result.success:
            logger.error(f"Command exited with {result.return_code}: {' '.join(command)}")
            raise CommandFailedError(command, result.return_code, result.stderr.strip())
        return result


_executor: CommandExecutor | None = None


def get_executor() -> CommandExecutor:
    """Get or create global command executor."""
    global _executor
    if _executor is None:
        _executor = CommandExecutor()
    return _executor
