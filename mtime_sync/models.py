from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Tuple


@dataclass(frozen=True)
class FileRef:
    """
    A file inside the vault, addressed by its vault-relative path.
    """
    path: str


@dataclass
class FileStats:
    birthtime: datetime     # local, naive
    mtime: datetime


@dataclass
class SyncOutcome:
    ref: FileRef
    abs_path: Path
    timestamp: str          # the string handed to SetFile


@dataclass
class BatchResult:
    success: int = 0
    failure: int = 0

    # Diagnostic only; end users see the counts
    failed: List[Tuple[FileRef, Exception]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success + self.failure
