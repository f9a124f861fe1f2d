import logging
from typing import List, Optional

from . import config
from .core import MtimeSyncer
from .exceptions import MtimeSyncError, UnsupportedAdapterError
from .host import Host
from .i18n import detect_language, translate
from .models import BatchResult, FileRef, SyncOutcome
from .timestamps.setter import CommandRunner

STAGE_KEYS = {
    'resolve': 'stageResolve',
    'stat': 'stageStat',
    'exec': 'stageExec',
    'sync': 'stageSync',
}


class MtimeSyncPlugin:
    """
    Binds MtimeSyncer to a host: one command, two context-menu entries and
    the status notices.
    """

    def __init__(self,
                 host: Host,
                 runner: Optional[CommandRunner] = None,
                 notice_verbosity: str = config.DEFAULT_NOTICE_VERBOSITY,
                 max_workers: int = config.DEFAULT_MAX_WORKERS,
                 utility: str = config.SETFILE_UTILITY,
                 show_progress: bool = False):
        if notice_verbosity not in config.NOTICE_VERBOSITY:
            raise ValueError(f"notice_verbosity must be one of {config.NOTICE_VERBOSITY}")

        self.host = host
        self.notice_verbosity = notice_verbosity
        self.show_progress = show_progress
        self.lang = config.DEFAULT_LANGUAGE
        self.syncer = MtimeSyncer(host.adapter, runner=runner, utility=utility, max_workers=max_workers)

    def t(self, key: str, **fields) -> str:
        return translate(self.lang, key, **fields)

    def start(self):
        # Language is fixed for the session
        self.lang = detect_language(self.host.get_locale())
        logging.debug(f"Display language: {self.lang}")

        self.host.register_action(config.COMMAND_ID, self.t('commandName'), self._check_command)
        self.host.register_file_menu(
            self.t('menuTitle'), config.MENU_ICON, self.sync_mtime_to_created,
            visible=lambda ref: not self.host.is_folder(ref),
        )
        self.host.register_files_menu(
            self.t('menuTitle'), config.MENU_ICON, self.sync_batch,
            visible=lambda refs: len(self._files_only(refs)) > 0,
        )

    def stop(self):
        self.host.unregister_all()

    def _files_only(self, refs: List[FileRef]) -> List[FileRef]:
        return [ref for ref in refs if not self.host.is_folder(ref)]

    def _check_command(self, checking: bool) -> bool:
        active = self.host.get_active_file()
        if active is None or self.host.is_folder(active):
            return False
        if not checking:
            self.sync_mtime_to_created(active)
        return True

    def sync_mtime_to_created(self, ref: Optional[FileRef] = None) -> Optional[SyncOutcome]:
        """Syncs one file (default: the active one) and reports the result as a notice."""
        target = ref or self.host.get_active_file()
        if target is None or self.host.is_folder(target):
            self.host.notify(self.t('noFileSelected'))
            return None

        try:
            outcome = self.syncer.sync_file(target)
        except MtimeSyncError as e:
            logging.error(f"Failed to sync {target.path} at {e.stage} stage: {e}")
            message = self.t('notFileSystem') if isinstance(e, UnsupportedAdapterError) else str(e)
            self.host.notify(self.t('errorAtStage', error=self.t('errorSyncing'),
                                    stage=self.t(STAGE_KEYS[e.stage]), message=message))
            return None

        if self.notice_verbosity == "detailed":
            self.host.notify(self.t('syncSuccessDetailed', timestamp=outcome.timestamp))
        else:
            self.host.notify(self.t('syncSuccess'))
        return outcome

    def sync_batch(self, refs: List[FileRef]) -> BatchResult:
        """Syncs every file, then shows one summary notice with the counts. Folders are skipped."""
        files = self._files_only(refs)
        if len(files) < len(refs):
            logging.debug(f"Skipping {len(refs) - len(files)} folders")
        result = self.syncer.sync_batch(files, progress=self.show_progress)
        self.host.notify(self.t('batchSuccess', success=result.success, fail=result.failure))
        return result
