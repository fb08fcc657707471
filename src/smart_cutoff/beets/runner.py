"""External process invocation for the `beet` command."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ProcessError(RuntimeError):
    """Raised when an external command fails to launch or reports an error."""


class ProcessRunner(Protocol):
    """Runs a program to completion and returns its standard output."""

    def run(self, program: Path, args: Sequence[str]) -> bytes:
        """Run `program` with `args`.

        Raises:
            ProcessError: On launch failure, non-empty stderr or non-zero exit.
        """
        ...


def check_output(returncode: int, stdout: bytes, stderr: bytes) -> bytes:
    """Return stdout, or raise if the process reported any error.

    Any stderr output counts as a failure, even with a zero exit status.
    """
    try:
        stderr_text = stderr.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProcessError("non-utf8 in beet stderr") from e

    if stderr_text:
        raise ProcessError(f"subprocess stderr: {stderr_text}")

    if returncode != 0:
        raise ProcessError(f"subprocess status: {returncode}")

    return stdout


class SubprocessRunner:
    """ProcessRunner backed by `subprocess.run`.

    Blocks until the process exits; there is no timeout.
    """

    def run(self, program: Path, args: Sequence[str]) -> bytes:
        logger.info("%s %s", program, list(args))
        try:
            completed = subprocess.run(
                [str(program), *args],
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise ProcessError(f"failed to launch {program}: {e}") from e

        return check_output(completed.returncode, completed.stdout, completed.stderr)
