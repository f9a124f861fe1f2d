import os
from pathlib import Path, PurePosixPath

from ..exceptions import UnsupportedAdapterError
from ..models import FileRef


class StorageAdapter:
    """
    Backend holding the vault's files. Only FileSystemAdapter maps vault
    paths onto real files that SetFile can touch.
    """

    def get_name(self) -> str:
        return type(self).__name__


class FileSystemAdapter(StorageAdapter):
    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def get_base_path(self) -> Path:
        return self.base_path

    def is_folder(self, ref: FileRef) -> bool:
        return resolve_absolute_path(self, ref).is_dir()


def resolve_absolute_path(adapter: StorageAdapter, ref: FileRef) -> Path:
    """
    Joins the adapter root with the vault-relative path.

    Raises:
        UnsupportedAdapterError: the backend is not a direct filesystem.
    """
    if not isinstance(adapter, FileSystemAdapter):
        raise UnsupportedAdapterError(
            f"{adapter.get_name()} is not a file system adapter"
        )

    # Vault paths always use forward slashes and are rooted at the vault
    rel = PurePosixPath(ref.path)
    if rel.is_absolute():
        rel = rel.relative_to(rel.anchor)
    return Path(os.path.abspath(adapter.get_base_path().joinpath(*rel.parts)))
