"""Comparators on names, extensions and full paths.

All three are total orders: when the primary key ties, entries are
ordered by depth and then by the case-sensitive full path. Only the same
path compares equal.
"""

import os

from ..entry import FileEntry
from ..iocase import IOCase
from .base import FileComparator


def get_extension(name: str) -> str:
    """Text after the last dot of ``name``, or '' when there is none."""
    _, dot, extension = name.rpartition('.')
    return extension if dot else ''


def _tie_break(a: FileEntry, b: FileEntry) -> int:
    if a.depth != b.depth:
        return -1 if a.depth < b.depth else 1
    return IOCase.SENSITIVE.compare(os.fspath(a.path), os.fspath(b.path))


class _KeyedComparator(FileComparator):
    """Compares a string key under an IOCase, then breaks ties."""

    def __init__(self, case: IOCase = IOCase.SENSITIVE):
        self.case = case or IOCase.SENSITIVE

    def _key(self, entry: FileEntry) -> str:
        raise NotImplementedError

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        result = self.case.compare(self._key(a), self._key(b))
        if result != 0:
            return result
        return _tie_break(a, b)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(case={self.case.name})"


class NameComparator(_KeyedComparator):
    """Orders by the final path component."""

    def _key(self, entry: FileEntry) -> str:
        return entry.name


class ExtensionComparator(_KeyedComparator):
    """Orders by extension (``get_extension``) of the name."""

    def _key(self, entry: FileEntry) -> str:
        return get_extension(entry.name)


class PathComparator(_KeyedComparator):
    """Orders by the full path string."""

    def _key(self, entry: FileEntry) -> str:
        return os.fspath(entry.path)


NAME_COMPARATOR = NameComparator()
NAME_REVERSE = NAME_COMPARATOR.reversed()
NAME_INSENSITIVE_COMPARATOR = NameComparator(IOCase.INSENSITIVE)
NAME_INSENSITIVE_REVERSE = NAME_INSENSITIVE_COMPARATOR.reversed()
NAME_SYSTEM_COMPARATOR = NameComparator(IOCase.SYSTEM)
NAME_SYSTEM_REVERSE = NAME_SYSTEM_COMPARATOR.reversed()

EXTENSION_COMPARATOR = ExtensionComparator()
EXTENSION_REVERSE = EXTENSION_COMPARATOR.reversed()
EXTENSION_INSENSITIVE_COMPARATOR = ExtensionComparator(IOCase.INSENSITIVE)
EXTENSION_INSENSITIVE_REVERSE = EXTENSION_INSENSITIVE_COMPARATOR.reversed()

PATH_COMPARATOR = PathComparator()
PATH_REVERSE = PATH_COMPARATOR.reversed()
PATH_INSENSITIVE_COMPARATOR = PathComparator(IOCase.INSENSITIVE)
PATH_INSENSITIVE_REVERSE = PATH_INSENSITIVE_COMPARATOR.reversed()
