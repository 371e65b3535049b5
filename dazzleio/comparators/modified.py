"""Last-modified comparator. Missing entries sort first."""

from ..entry import FileEntry
from .base import FileComparator


class LastModifiedComparator(FileComparator):
    """Orders entries from oldest to newest (nanosecond resolution)."""

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        ma, mb = a.modified_ns(), b.modified_ns()
        if ma is None or mb is None:
            return (ma is not None) - (mb is not None)
        return (ma > mb) - (ma < mb)


LASTMODIFIED_COMPARATOR = LastModifiedComparator()
LASTMODIFIED_REVERSE = LASTMODIFIED_COMPARATOR.reversed()
