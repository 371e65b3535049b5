"""Size comparators.

The plain comparator treats every directory as size 0, so two
directories always compare equal. The sum variant measures directories by
the total size of the regular files below them. Missing entries sort
before every existing entry in both variants.
"""

import os
from typing import Optional, Tuple

from cachetools import TTLCache

from ..entry import FileEntry
from ..files import size_of_directory
from .base import FileComparator

# Key for entries that do not exist; sorts before any (1, size) key
_MISSING: Tuple[int, ...] = (0,)


class SizeComparator(FileComparator):
    """Orders entries by length in bytes.

    Example:
        >>> SIZE_COMPARATOR.sort(["big.bin", "small.txt"])
        ['small.txt', 'big.bin']
    """

    def __init__(self,
                 sum_directory_contents: bool = False,
                 cache_ttl: Optional[float] = None,
                 cache_size: int = 1024):
        """Initialize a size comparator.

        Args:
            sum_directory_contents: Measure directories by their contents
            cache_ttl: Seconds to remember directory sums (None = no cache)
            cache_size: Maximum number of remembered directories
        """
        self.sum_directory_contents = sum_directory_contents
        self._cache = None
        if cache_ttl is not None:
            if not sum_directory_contents:
                raise ValueError("cache_ttl only applies when summing directory contents")
            self._cache = TTLCache(maxsize=cache_size, ttl=cache_ttl)

    def _key(self, entry: FileEntry) -> Tuple[int, ...]:
        if not entry.exists():
            return _MISSING
        if entry.is_dir():
            if not self.sum_directory_contents:
                return (1, 0)
            return (1, self._directory_size(entry))
        return (1, entry.size())

    def _directory_size(self, entry: FileEntry) -> int:
        if self._cache is None:
            return size_of_directory(entry)
        key = os.fspath(entry.path)
        size = self._cache.get(key)
        if size is None:
            size = size_of_directory(entry)
            self._cache[key] = size
        return size

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        ka, kb = self._key(a), self._key(b)
        return (ka > kb) - (ka < kb)

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()

    def __repr__(self) -> str:
        return f"SizeComparator(sum_directory_contents={self.sum_directory_contents})"


SIZE_COMPARATOR = SizeComparator()
SIZE_REVERSE = SIZE_COMPARATOR.reversed()
SIZE_SUMDIR_COMPARATOR = SizeComparator(sum_directory_contents=True)
SIZE_SUMDIR_REVERSE = SIZE_SUMDIR_COMPARATOR.reversed()
