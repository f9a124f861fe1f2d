import io
import subprocess
import threading
import time
from pathlib import Path

import pytest

from mtime_sync.host import ConsoleHost
from mtime_sync.storage.adapters import FileSystemAdapter
from mtime_sync.timestamps.setter import CommandRunner


class FakeRunner(CommandRunner):
    """Records SetFile argument lists instead of spawning processes."""

    def __init__(self, returncode=0, stderr="", delays=None):
        super().__init__()
        self.returncode = returncode
        self.stderr = stderr
        self.delays = delays or {}  # file name -> seconds
        self.calls = []
        self.finished = []
        self._lock = threading.Lock()

    def run(self, argv):
        with self._lock:
            self.calls.append(argv)

        delay = self.delays.get(Path(argv[-1]).name, 0)
        if delay:
            time.sleep(delay)

        with self._lock:
            self.finished.append(argv)
        return subprocess.CompletedProcess(argv, self.returncode, stdout=None, stderr=self.stderr)


@pytest.fixture
def vault(tmp_path):
    """A vault root with a few notes in it."""
    root = tmp_path / "vault"
    (root / "daily").mkdir(parents=True)
    (root / "a.md").write_text("a")
    (root / "b.md").write_text("b")
    (root / "daily" / "c.md").write_text("c")
    return root


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def host(vault):
    """ConsoleHost on the vault, English locale, notices captured in memory."""
    return ConsoleHost(FileSystemAdapter(vault), locale="en-US", stream=io.StringIO())