"""
The host application's side of the plugin contract.

The plugin only talks to the host through this interface: registering a
command and context-menu entries, showing notices, and asking for the
locale, the active file, folder checks and the storage adapter.
ConsoleHost implements it for command-line use.
"""
import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO

from .models import FileRef
from .storage.adapters import FileSystemAdapter, StorageAdapter


@dataclass
class Action:
    action_id: str
    name: str
    # check_callback(checking) -> bool; with checking=False it runs the action
    check_callback: Callable[[bool], bool]


@dataclass
class MenuItem:
    title: str
    icon: str
    handler: Callable
    visible: Optional[Callable[..., bool]] = None

    def shown_for(self, target) -> bool:
        return self.visible is None or self.visible(target)


class Host(ABC):
    def __init__(self, adapter: StorageAdapter):
        self.adapter = adapter

    @abstractmethod
    def register_action(self, action_id: str, name: str, check_callback: Callable[[bool], bool]) -> None:
        ...

    @abstractmethod
    def register_file_menu(self, title: str, icon: str, handler: Callable[[FileRef], None],
                           visible: Optional[Callable[[FileRef], bool]] = None) -> None:
        ...

    @abstractmethod
    def register_files_menu(self, title: str, icon: str, handler: Callable[[List[FileRef]], None],
                            visible: Optional[Callable[[List[FileRef]], bool]] = None) -> None:
        ...

    @abstractmethod
    def unregister_all(self) -> None:
        ...

    @abstractmethod
    def notify(self, message: str) -> None:
        ...

    @abstractmethod
    def get_locale(self) -> str:
        ...

    @abstractmethod
    def get_active_file(self) -> Optional[FileRef]:
        ...

    @abstractmethod
    def is_folder(self, ref: FileRef) -> bool:
        ...


class ConsoleHost(Host):
    """Keeps registrations in memory and prints notices to a stream."""

    def __init__(self,
                 adapter: StorageAdapter,
                 active_file: Optional[FileRef] = None,
                 locale: Optional[str] = None,
                 stream: Optional[TextIO] = None):
        super().__init__(adapter)
        self.active_file = active_file
        self.locale = locale
        self.stream = stream or sys.stdout
        self.actions: Dict[str, Action] = {}
        self.file_menu: List[MenuItem] = []
        self.files_menu: List[MenuItem] = []

    def register_action(self, action_id, name, check_callback):
        self.actions[action_id] = Action(action_id, name, check_callback)

    def register_file_menu(self, title, icon, handler, visible=None):
        self.file_menu.append(MenuItem(title, icon, handler, visible))

    def register_files_menu(self, title, icon, handler, visible=None):
        self.files_menu.append(MenuItem(title, icon, handler, visible))

    def unregister_all(self):
        self.actions.clear()
        self.file_menu.clear()
        self.files_menu.clear()

    def notify(self, message):
        print(message, file=self.stream)

    def get_locale(self):
        if self.locale:
            return self.locale
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            value = os.environ.get(var)
            if value:
                return value
        return "en"

    def get_active_file(self):
        return self.active_file

    def is_folder(self, ref):
        # Only a direct filesystem can tell; other backends fail later on resolve
        if isinstance(self.adapter, FileSystemAdapter):
            return self.adapter.is_folder(ref)
        return False

    def run_action(self, action_id: str) -> bool:
        """Runs a registered action if its check passes. Returns whether it ran."""
        action = self.actions[action_id]
        if not action.check_callback(True):
            return False
        action.check_callback(False)
        return True

    def file_menu_items(self, ref: FileRef) -> List[MenuItem]:
        return [item for item in self.file_menu if item.shown_for(ref)]

    def open_file_menu(self, ref: FileRef) -> None:
        for item in self.file_menu_items(ref):
            item.handler(ref)

    def files_menu_items(self, refs: List[FileRef]) -> List[MenuItem]:
        return [item for item in self.files_menu if item.shown_for(refs)]

    def open_files_menu(self, refs: List[FileRef]) -> None:
        for item in self.files_menu_items(refs):
            item.handler(refs)
