"""Process invocation for the pdftk binary."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)


class PdftkError(RuntimeError):
    """Base class for failures of the external pdftk binary."""


class PdftkNotFoundError(PdftkError):
    """Raised when the pdftk binary cannot be executed."""


class PdftkCommandError(PdftkError):
    """Raised when pdftk exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"pdftk exited with status {returncode}: {' '.join(self.command)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class Runner(Protocol):
    def __call__(self, command: Sequence[str]) -> str: ...


def run_command(command: Sequence[str]) -> str:
    """Run ``command`` to completion and return its decoded stdout.

    Blocks until the process exits. There is no timeout.
    """
    args = [str(arg) for arg in command]
    logger.debug("Running %s", args)

    try:
        completed = subprocess.run(args, capture_output=True, check=False)
    except FileNotFoundError as exc:
        logger.warning("pdftk binary not found: %s", args[0])
        raise PdftkNotFoundError(f"pdftk binary not found: {args[0]}") from exc
    except PermissionError as exc:
        logger.warning("pdftk binary not executable: %s", args[0])
        raise PdftkNotFoundError(f"pdftk binary not executable: {args[0]}") from exc

    stdout = completed.stdout.decode("utf-8", errors="replace")
    stderr = completed.stderr.decode("utf-8", errors="replace")
    logger.debug("%s exited with %d", args[0], completed.returncode)

    if completed.returncode != 0:
        logger.warning("pdftk failed (%d): %s", completed.returncode, stderr.strip())
        raise PdftkCommandError(args, completed.returncode, stderr)

    return stdout
