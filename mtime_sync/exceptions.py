"""
Exception hierarchy for mtime sync.

Each error names the stage of the single-file pipeline it came from so
callers can report where a sync stopped.
"""
from typing import Optional


class MtimeSyncError(Exception):
    """Base exception for all mtime sync errors."""
    stage = "sync"


class UnsupportedAdapterError(MtimeSyncError):
    """Raised when the storage backend is not a direct filesystem."""
    stage = "resolve"


class StatError(MtimeSyncError):
    """Raised when a file's timestamps cannot be read."""
    stage = "stat"


class ExecError(MtimeSyncError):
    """Raised when the external timestamp utility fails or cannot be started."""
    stage = "exec"

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
