"""Structural comparators: path depth and directories-first."""

from ..entry import FileEntry
from .base import FileComparator


class DepthComparator(FileComparator):
    """Orders shallower paths first. Paths at the same depth are equal."""

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        return a.depth - b.depth


class DirectoryComparator(FileComparator):
    """Orders directories before everything else.

    Combine with another comparator via ``then`` to order within each group.
    """

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        return int(b.is_dir()) - int(a.is_dir())


DEPTH_COMPARATOR = DepthComparator()
DEPTH_REVERSE = DEPTH_COMPARATOR.reversed()
DIRECTORY_COMPARATOR = DirectoryComparator()
DIRECTORY_REVERSE = DIRECTORY_COMPARATOR.reversed()
