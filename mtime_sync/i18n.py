"""
Display strings for the two supported languages.

The language is picked once at startup from the host locale and passed
around as a plain value; lookups are pure.
"""
from typing import Optional

from . import config

MESSAGES = {
    'ja': {
        'commandName': '修正日時を作成日時に同期',
        'menuTitle': '修正日時を作成日時に同期',
        'noFileSelected': 'ファイルが選択されていません。',
        'notFileSystem': 'このプラグインはファイルシステムアダプターでのみ動作します。',
        'errorSyncing': '時刻の同期中にエラーが発生しました',
        'errorAtStage': '{error} ({stage}): {message}',
        'stageResolve': 'パスの解決',
        'stageStat': 'ファイル情報の取得',
        'stageExec': 'SetFile の実行',
        'stageSync': '同期',
        'syncSuccess': '修正日時を作成日時に同期しました',
        'syncSuccessDetailed': '修正日時を作成日時に同期しました ({timestamp})',
        'batchSuccess': '完了: {success} 件, 失敗: {fail} 件',
    },
    'en': {
        'commandName': 'Sync mtime to created',
        'menuTitle': 'Sync mtime to created',
        'noFileSelected': 'No file selected.',
        'notFileSystem': 'This plugin only works with the file system adapter.',
        'errorSyncing': 'Error syncing time',
        'errorAtStage': '{error} ({stage}): {message}',
        'stageResolve': 'resolving path',
        'stageStat': 'reading file stats',
        'stageExec': 'running SetFile',
        'stageSync': 'syncing',
        'syncSuccess': 'Synced modification time to creation time',
        'syncSuccessDetailed': 'Synced modification time to creation time ({timestamp})',
        'batchSuccess': 'Done: {success}, Failed: {fail}',
    },
}


def detect_language(locale: Optional[str]) -> str:
    """Japanese locales (ja, ja-JP, ja_JP.UTF-8, ...) get 'ja', everything else 'en'."""
    if locale and locale.lower().startswith('ja'):
        return 'ja'
    return config.DEFAULT_LANGUAGE


def translate(lang: str, key: str, **fields) -> str:
    table = MESSAGES.get(lang, MESSAGES[config.DEFAULT_LANGUAGE])
    text = table[key]
    # Plain substitution; field values may contain braces
    for name, value in fields.items():
        text = text.replace('{' + name + '}', str(value))
    return text
