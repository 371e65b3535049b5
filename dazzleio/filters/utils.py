"""Convenience constructors and bulk helpers for filters.

These functions wrap the filter classes for the common cases, in the same
spirit as the functional API of the tree walker.
"""

from typing import Any, Iterable, Iterator, List

from ..entry import FileEntry
from ..iocase import IOCase
from .attributes import DIRECTORY, FILE, SizeFileFilter
from .base import FileFilter
from .logical import AndFileFilter, NotFileFilter, OrFileFilter, _as_filter
from .names import NameFileFilter, SuffixFileFilter

# Version-control metadata directories
VCS_DIRECTORIES = ('.git', '.svn', '.hg', 'CVS', '.bzr')


def and_filter(*filters: Any) -> AndFileFilter:
    return AndFileFilter(*filters)


def or_filter(*filters: Any) -> OrFileFilter:
    return OrFileFilter(*filters)


def not_filter(file_filter: Any) -> NotFileFilter:
    return NotFileFilter(file_filter)


def as_filter(value: Any) -> FileFilter:
    """Return ``value`` as a FileFilter, wrapping plain callables."""
    return _as_filter(value)


def size_range_filter(min_size: int, max_size: int) -> AndFileFilter:
    """Accepts entries with ``min_size <= size <= max_size``."""
    if min_size > max_size:
        raise ValueError(f"min_size {min_size} is larger than max_size {max_size}")
    return AndFileFilter(
        SizeFileFilter(min_size, accept_larger=True),
        SizeFileFilter(max_size + 1, accept_larger=False),
    )


def suffix_file_filter(*suffixes: str, case: IOCase = IOCase.SENSITIVE) -> AndFileFilter:
    """Regular files whose name ends with one of ``suffixes``."""
    return AndFileFilter(FILE, SuffixFileFilter(*suffixes, case=case))


def make_directory_only(file_filter: Any = None) -> FileFilter:
    """Restrict ``file_filter`` to directories (None means all directories)."""
    if file_filter is None:
        return DIRECTORY
    return AndFileFilter(DIRECTORY, file_filter)


def make_file_only(file_filter: Any = None) -> FileFilter:
    """Restrict ``file_filter`` to regular files (None means all files)."""
    if file_filter is None:
        return FILE
    return AndFileFilter(FILE, file_filter)


def make_vcs_aware(file_filter: Any = None) -> FileFilter:
    """Exclude version-control directories from ``file_filter``."""
    ignore = NotFileFilter(AndFileFilter(DIRECTORY, NameFileFilter(VCS_DIRECTORIES)))
    if file_filter is None:
        return ignore
    return AndFileFilter(file_filter, ignore)


def iter_filtered(file_filter: Any, files: Iterable[Any]) -> Iterator[FileEntry]:
    """Yield the entries of ``files`` accepted by ``file_filter``."""
    file_filter = _as_filter(file_filter)
    for file in files:
        entry = FileEntry.of(file)
        if file_filter.test(entry):
            yield entry


def filter_files(file_filter: Any, files: Iterable[Any]) -> List[FileEntry]:
    """List version of ``iter_filtered``; None items are dropped."""
    return list(iter_filtered(file_filter, files))
