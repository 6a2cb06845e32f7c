"""Process utilities."""
import logging
import subprocess
from typing import List, Optional, Protocol, Sequence

from ..errors import CommandTimeout, ProcessSpawnFailed

logger = logging.getLogger(__name__)


def run(cmd: Sequence[str], timeout: Optional[float] = None) -> subprocess.CompletedProcess:
    """Run a subprocess synchronously with automatic logging.

    Output is captured as bytes so that invalid UTF-8 from a pane never
    breaks decoding; callers decode it permissively.

    Args:
        cmd: Command to run as list of strings
        timeout: Seconds to wait before giving up (None waits forever)

    Returns:
        CompletedProcess result

    Raises:
        ProcessSpawnFailed: The program could not be started
        CommandTimeout: The program did not finish within ``timeout``
    """
    cmd = list(cmd)
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout}s: {' '.join(cmd)}")
        raise CommandTimeout(cmd, timeout)
    except OSError as e:
        logger.error(f"Command failed with exception: {' '.join(cmd)} - {e}")
        raise ProcessSpawnFailed(cmd, e) from e

    if result.stderr:
        logger.debug(f"stderr: {decode(result.stderr).strip()}")

    if result.returncode != 0:
        logger.error(f"Command failed with exit code {result.returncode}: {' '.join(cmd)}")
    else:
        logger.debug(f"Command succeeded: {' '.join(cmd)}")

    return result


def decode(data: bytes) -> str:
    """Decode process output, replacing invalid byte sequences."""
    return data.decode("utf-8", errors="replace")


def strip_newline(text: str) -> str:
    """Remove exactly one trailing newline, keeping any other whitespace."""
    if text.endswith("\n"):
        return text[:-1]
    return text


class Executor(Protocol):
    """Anything able to run a command and hand back its standard output."""

    def execute(self, args: Sequence[str], timeout: Optional[float] = None) -> str:
        ...

    @property
    def last_executed(self) -> Optional[List[str]]:
        ...


class ShellExecutor:
    """Executes commands for real and remembers the last one."""

    def __init__(self):
        self._executed: Optional[List[str]] = None

    def execute(self, args: Sequence[str], timeout: Optional[float] = None) -> str:
        """Run ``args`` and return its stdout without the trailing newline."""
        self._executed = list(args)
        result = run(self._executed, timeout=timeout)
        return strip_newline(decode(result.stdout))

    @property
    def last_executed(self) -> Optional[List[str]]:
        return self._executed
