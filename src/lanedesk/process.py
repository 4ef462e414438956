"""Thin wrapper around ``subprocess.run`` shared by every external command.

Commands are always executed from an argument list, never through a shell,
so project paths and scheme names need no quoting. The ``Runner`` callable
type lets the discovery layer, the lane runner, and the doctor accept an
injected runner in tests.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from lanedesk.exceptions import ToolInvocationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessOutput:
    """Captured result of one finished process.

    Attributes:
        returncode: Exit status. Negative when terminated by a signal.
        stdout: Decoded standard output (undecodable bytes replaced).
        stderr: Decoded standard error (undecodable bytes replaced).
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True when the process exited with status zero."""
        return self.returncode == 0

    @property
    def combined(self) -> str:
        """Standard output followed by standard error."""
        return f"{self.stdout}\n{self.stderr}"


Runner = Callable[..., ProcessOutput]


def run_process(
    argv: Sequence[str],
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> ProcessOutput:
    """Run a command to completion and capture its text output.

    Args:
        argv: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Seconds to wait before giving up. None waits forever.

    Returns:
        The captured ``ProcessOutput``. A non-zero exit is not an error.

    Raises:
        ToolInvocationError: The program could not be spawned or did not
            finish within ``timeout``.
    """
    args = [str(a) for a in argv]
    logger.debug("Running %s (cwd=%s)", args, cwd)
    try:
        completed = subprocess.run(
            args,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise ToolInvocationError(args, f"timed out after {timeout}s") from exc
    except OSError as exc:
        raise ToolInvocationError(args, str(exc)) from exc

    return ProcessOutput(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
