import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, Optional

from tqdm import tqdm

from . import config
from .models import BatchResult, FileRef, FileStats, SyncOutcome
from .storage.adapters import StorageAdapter, resolve_absolute_path
from .timestamps.formatting import format_setfile_timestamp
from .timestamps.setter import CommandRunner, set_modification_time
from .timestamps.stat import read_file_stats


class MtimeSyncer:
    """
    Copies a file's creation time onto its modification time.

    Depends only on the storage adapter, a stat reader and a command runner,
    so it can run under any host.
    """

    def __init__(self,
                 adapter: StorageAdapter,
                 runner: Optional[CommandRunner] = None,
                 stat_reader: Callable[..., FileStats] = read_file_stats,
                 utility: str = config.SETFILE_UTILITY,
                 max_workers: int = config.DEFAULT_MAX_WORKERS):
        self.adapter = adapter
        self.runner = runner or CommandRunner()
        self.stat_reader = stat_reader
        self.utility = utility
        self.max_workers = max_workers

    def sync_file(self, ref: FileRef) -> SyncOutcome:
        """
        Resolve -> stat -> format -> SetFile. The first failing stage raises
        its MtimeSyncError subclass and nothing after it runs.
        """
        abs_path = resolve_absolute_path(self.adapter, ref)
        stats = self.stat_reader(abs_path)
        stamp = format_setfile_timestamp(stats.birthtime)
        set_modification_time(abs_path, stamp, runner=self.runner, utility=self.utility)

        logging.debug(f"Synced {ref.path}: mtime {stats.mtime} -> {stamp}")
        return SyncOutcome(ref=ref, abs_path=abs_path, timestamp=stamp)

    def sync_batch(self, refs: Iterable[FileRef], progress: bool = False) -> BatchResult:
        """
        Syncs every file independently on a bounded worker pool.

        A failure is logged and counted without touching the other files.
        Returns once every file has settled.
        """
        refs = list(refs)
        result = BatchResult()
        if not refs:
            return result

        logging.info(f"Syncing {len(refs)} files ({self.max_workers} workers)...")

        with ThreadPoolExecutor(max_workers=max(1, self.max_workers)) as executor:
            future_to_ref = {executor.submit(self.sync_file, ref): ref for ref in refs}

            # Counters are only touched here, on the submitting thread
            for future in tqdm(as_completed(future_to_ref), total=len(refs),
                               desc="Syncing", disable=not progress):
                ref = future_to_ref[future]
                try:
                    future.result()
                    result.success += 1
                except Exception as e:
                    logging.error(f"Failed to sync {ref.path}: {e}")
                    result.failure += 1
                    result.failed.append((ref, e))

        logging.info(f"Batch complete. Synced {result.success}, failed {result.failure}.")
        return result
