import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from .. import config
from ..exceptions import ExecError


class CommandRunner:
    """
    Runs an argument list without a shell and returns the CompletedProcess.
    Swapped out in tests to avoid spawning SetFile.
    """

    def __init__(self, timeout: Optional[float] = config.DEFAULT_TIMEOUT):
        self.timeout = timeout

    def run(self, argv: List[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            timeout=self.timeout,
        )


def build_setfile_command(path: Path, stamp: str, utility: str = config.SETFILE_UTILITY) -> List[str]:
    return [utility, config.SETFILE_MTIME_FLAG, stamp, str(path)]


def set_modification_time(path: Path,
                          stamp: str,
                          runner: Optional[CommandRunner] = None,
                          utility: str = config.SETFILE_UTILITY):
    """
    Sets the modification date of `path` to `stamp` (MM/DD/YYYY HH:MM:SS, local time).

    Raises:
        ExecError: the utility could not be started, timed out, or exited non-zero.
    """
    runner = runner or CommandRunner()
    argv = build_setfile_command(path, stamp, utility)
    logging.debug(f"Running: {argv}")

    try:
        result = runner.run(argv)
    except FileNotFoundError as e:
        raise ExecError(f"{utility} not found; install the Xcode command line tools") from e
    except subprocess.TimeoutExpired as e:
        raise ExecError(f"{utility} timed out after {e.timeout}s on {path}") from e
    except OSError as e:
        raise ExecError(f"Failed to start {utility}: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        message = stderr or f"{utility} exited with status {result.returncode}"
        raise ExecError(message, returncode=result.returncode, stderr=stderr)
