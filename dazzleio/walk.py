"""Filter-driven directory traversal.

The walker is the consumer of the visit signals produced by filters. It
stats each child exactly once while listing its parent and passes that
result down through ``accept_path``, so filters never repeat the syscall.
"""

import logging
import os
from typing import Any, Callable, Iterator, Optional, Set

from .config import LinkOption
from .entry import FileEntry
from .filters.logical import TRUE, _as_filter
from .visit import VisitResult

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[str, OSError], None]


def walk(root: Any,
         file_filter: Any = TRUE,
         dir_filter: Any = TRUE,
         max_depth: Optional[int] = None,
         follow_links: bool = False,
         include_dirs: bool = False,
         on_error: Optional[ErrorHandler] = None) -> Iterator[FileEntry]:
    """Walk a directory tree depth-first, pre-order.

    Args:
        root: Directory to start from (not itself yielded)
        file_filter: Files are yielded when it returns CONTINUE
        dir_filter: Directories are descended into when it returns CONTINUE
        max_depth: Maximum depth to list (1 = immediate children only)
        follow_links: Descend into symlinked directories and stat link targets
        include_dirs: Also yield the directories that are descended into
        on_error: Called with (path, exception) when a directory cannot
                  be listed; such errors are skipped otherwise

    Yields:
        FileEntry objects carrying their pre-fetched attributes

    Example:
        >>> for entry in walk(src, file_filter=SuffixFileFilter('.py'),
        ...                   dir_filter=~NameFileFilter('.git')):
        ...     print(entry.path)
    """
    file_filter = _as_filter(file_filter)
    dir_filter = _as_filter(dir_filter)
    link_option = LinkOption.from_flag(follow_links)
    visited: Set[Any] = set()

    def _walk(directory: str, depth: int) -> Iterator[FileEntry]:
        if max_depth is not None and depth > max_depth:
            return
        for child in _list_children(directory, on_error):
            attributes = _child_stat(child, link_option)
            if attributes is None:
                continue
            entry = FileEntry(child.path, attributes, link_option)
            if entry.is_dir():
                if dir_filter.accept_path(entry, attributes) is not VisitResult.CONTINUE:
                    continue
                # Skip cycles introduced by followed links
                if follow_links:
                    key = (attributes.st_dev, attributes.st_ino)
                    if key in visited:
                        continue
                    visited.add(key)
                if include_dirs:
                    yield entry
                yield from _walk(child.path, depth + 1)
            elif file_filter.accept_path(entry, attributes) is VisitResult.CONTINUE:
                yield entry

    root_entry = FileEntry.of(root)
    if root_entry is None:
        raise ValueError("The walk root must not be None")
    if follow_links:
        root_stat = FileEntry(root_entry.path, link_option=link_option).stat()
        if root_stat is not None:
            visited.add((root_stat.st_dev, root_stat.st_ino))
    yield from _walk(os.fspath(root_entry.path), 1)


def _list_children(directory: str, on_error: Optional[ErrorHandler]):
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda child: child.name)
    except OSError as e:
        if on_error is not None:
            on_error(directory, e)
        else:
            logger.debug("Cannot list %s: %s", directory, e)
        return []


def _child_stat(child: os.DirEntry, link_option: LinkOption) -> Optional[os.stat_result]:
    try:
        return child.stat(follow_symlinks=link_option.follow_symlinks)
    except OSError as e:
        # Dangling link or entry removed mid-walk
        logger.debug("Cannot stat %s: %s", child.path, e)
        return None


def count_entries(root: Any, file_filter: Any = TRUE, dir_filter: Any = TRUE,
                  **kwargs) -> int:
    """Count the files a walk with these filters would yield."""
    return sum(1 for _ in walk(root, file_filter, dir_filter, **kwargs))


__all__ = [
    'walk',
    'count_entries',
]
