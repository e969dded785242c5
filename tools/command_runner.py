"""External command execution."""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from .base import ToolResult

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Capability for running external programs such as git and cargo.

    Implementations block until the program exits. A non-zero exit status
    or a program that cannot be started yields a failed result.
    """

    @abstractmethod
    def run(
        self,
        program: str,
        args: Sequence[str],
        cwd: Path | str | None = None,
    ) -> ToolResult:
        """Run a program to completion.

        Args:
            program: Executable name or path
            args: Program arguments
            cwd: Working directory (default: current directory)

        Returns:
            ToolResult carrying the exit status
        """
        ...


class SubprocessRunner(CommandRunner):
    """Run programs with ``subprocess``.

    Output is not captured so the user sees clone and build progress
    directly. There is no timeout.
    """

    def run(
        self,
        program: str,
        args: Sequence[str],
        cwd: Path | str | None = None,
    ) -> ToolResult:
        parts = [program, *args]
        logger.debug("Running %s", " ".join(parts))

        try:
            result = subprocess.run(parts, cwd=cwd, check=False)
        except FileNotFoundError:
            return ToolResult.failed(f"Command not found: {program}")
        except OSError as e:
            return ToolResult.failed(f"Failed to run {program}: {e}")

        if result.returncode != 0:
            return ToolResult.failed(
                f"{program} exited with status {result.returncode}",
                returncode=result.returncode,
            )

        return ToolResult.ok(returncode=result.returncode)
