"""Filters on access permissions of the current process.

A missing entry is neither readable nor unreadable: it matches none of
these filters.
"""

from typing import Optional

from ..entry import FileEntry
from .base import FileFilter


class _AccessFileFilter(FileFilter):
    """Base for permission checks; ``granted`` selects the polarity."""

    def __init__(self, granted: bool = True):
        self.granted = granted

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None or not entry.exists():
            return False
        return self._check(entry) == self.granted

    def _check(self, entry: FileEntry) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(granted={self.granted})"


class CanReadFileFilter(_AccessFileFilter):
    def _check(self, entry: FileEntry) -> bool:
        return entry.can_read()


class CanWriteFileFilter(_AccessFileFilter):
    def _check(self, entry: FileEntry) -> bool:
        return entry.can_write()


class CanExecuteFileFilter(_AccessFileFilter):
    """Executable files, or searchable directories."""

    def _check(self, entry: FileEntry) -> bool:
        return entry.can_execute()


CAN_READ = CanReadFileFilter(granted=True)
CANNOT_READ = CanReadFileFilter(granted=False)
CAN_WRITE = CanWriteFileFilter(granted=True)
CANNOT_WRITE = CanWriteFileFilter(granted=False)
CAN_EXECUTE = CanExecuteFileFilter(granted=True)
CANNOT_EXECUTE = CanExecuteFileFilter(granted=False)
READ_ONLY = CAN_READ & CANNOT_WRITE
