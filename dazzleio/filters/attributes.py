"""Filters on entry type and metadata.

Every filter here needs at most one stat call per entry. A missing or
unreadable entry never matches.
"""

import logging
import os
from datetime import datetime
from typing import Optional, Union

from ..entry import FileEntry
from .base import FileFilter

logger = logging.getLogger(__name__)


class DirectoryFileFilter(FileFilter):
    """Accepts directories."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        return entry is not None and entry.is_dir()


class FileFileFilter(FileFilter):
    """Accepts regular files."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        return entry is not None and entry.is_file()


class SymbolicLinkFileFilter(FileFilter):
    """Accepts symbolic links, dangling ones included."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        return entry is not None and entry.is_symlink()


class HiddenFileFilter(FileFilter):
    """Accepts hidden (or, when ``hidden`` is False, visible) entries.

    Visibility is decided from the name on POSIX, so a missing dot-file is
    still hidden, but a missing entry is never reported as visible.
    """

    def __init__(self, hidden: bool = True):
        self.hidden = hidden

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        if self.hidden:
            return entry.is_hidden()
        return entry.exists() and not entry.is_hidden()

    def __repr__(self) -> str:
        return f"HiddenFileFilter(hidden={self.hidden})"


class EmptyFileFilter(FileFilter):
    """Accepts zero-length files and directories with no entries.

    With ``empty=False`` it accepts the opposite, still rejecting
    anything that cannot be inspected.
    """

    def __init__(self, empty: bool = True):
        self.empty = empty

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None or not entry.exists():
            return False
        is_empty = _is_empty(entry)
        if is_empty is None:
            return False
        return is_empty == self.empty

    def __repr__(self) -> str:
        return f"EmptyFileFilter(empty={self.empty})"


def _is_empty(entry: FileEntry) -> Optional[bool]:
    if not entry.is_dir():
        return entry.size() == 0
    try:
        with os.scandir(entry.path) as it:
            return next(it, None) is None
    except OSError as e:
        logger.debug("Cannot list %s: %s", entry.path, e)
        return None


class SizeFileFilter(FileFilter):
    """Accepts entries by size threshold.

    With ``accept_larger`` the entry matches when its size is at least
    ``size`` bytes; otherwise when it is strictly smaller.
    """

    def __init__(self, size: int, accept_larger: bool = True):
        if size is None or size < 0:
            raise ValueError(f"The size must be non-negative, got {size!r}")
        self.size = size
        self.accept_larger = accept_larger

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        length = entry.size()
        if length is None:
            return False
        smaller = length < self.size
        return self.accept_larger != smaller

    def __repr__(self) -> str:
        relation = ">=" if self.accept_larger else "<"
        return f"SizeFileFilter({relation}{self.size})"


class AgeFileFilter(FileFilter):
    """Accepts entries by last-modified time.

    The cutoff may be a ``datetime``, seconds since the epoch, or a path
    whose own modification time is used. With ``accept_older`` the entry
    matches when it is not newer than the cutoff; otherwise when it is
    strictly newer.
    """

    def __init__(self,
                 cutoff: Union[datetime, int, float, str, 'os.PathLike[str]'],
                 accept_older: bool = True):
        self.cutoff_ns = _cutoff_ns(cutoff)
        self.accept_older = accept_older

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        modified = entry.modified_ns()
        if modified is None:
            return False
        newer = modified > self.cutoff_ns
        return self.accept_older != newer

    def __repr__(self) -> str:
        relation = "<=" if self.accept_older else ">"
        return f"AgeFileFilter({relation}{self.cutoff_ns}ns)"


def _cutoff_ns(cutoff) -> int:
    if isinstance(cutoff, bool) or cutoff is None:
        raise ValueError(f"Invalid age cutoff: {cutoff!r}")
    if isinstance(cutoff, datetime):
        return int(cutoff.timestamp() * 1_000_000_000)
    if isinstance(cutoff, (int, float)):
        return int(cutoff * 1_000_000_000)
    reference = FileEntry.of(cutoff).modified_ns()
    if reference is None:
        raise ValueError(f"Reference file does not exist: {cutoff!r}")
    return reference


# Singleton instances
DIRECTORY = DirectoryFileFilter()
INSTANCE = DIRECTORY
FILE = FileFileFilter()
SYMBOLIC_LINK = SymbolicLinkFileFilter()
HIDDEN = HiddenFileFilter(hidden=True)
VISIBLE = HiddenFileFilter(hidden=False)
EMPTY = EmptyFileFilter(empty=True)
NOT_EMPTY = EmptyFileFilter(empty=False)
