"""Directory-level helpers: sizing and listing.

These wrap the walker for the common cases, the way the functional API
wraps the traversal classes.
"""

import logging
import os
from typing import Any, List, Optional

from .entry import FileEntry
from .filters.logical import TRUE, _as_filter
from .walk import walk

logger = logging.getLogger(__name__)


def size_of_directory(directory: Any) -> int:
    """Sum the sizes of all regular files below ``directory``.

    The walk covers the full subtree. Symbolic links are not followed,
    and entries that cannot be read are left out of the sum.

    Args:
        directory: Directory to measure

    Returns:
        Total size in bytes

    Raises:
        ValueError: If ``directory`` is not an existing directory
    """
    entry = FileEntry.of(directory)
    if entry is None or not entry.is_dir():
        raise ValueError(f"{directory!r} is not a directory")

    total = 0
    pending = [os.fspath(entry.path)]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                children = list(it)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", current, e)
            continue
        for child in children:
            try:
                if child.is_dir(follow_symlinks=False):
                    pending.append(child.path)
                elif child.is_file(follow_symlinks=False):
                    total += child.stat(follow_symlinks=False).st_size
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", child.path, e)
    return total


def list_dir(directory: Any, file_filter: Any = TRUE) -> List[FileEntry]:
    """List the immediate children of ``directory`` accepted by the filter.

    Files and directories are both candidates; the result is sorted by name.
    A missing or unreadable directory yields an empty list.
    """
    file_filter = _as_filter(file_filter)
    root = FileEntry.of(directory)
    if root is None:
        return []
    try:
        with os.scandir(root.path) as it:
            children = sorted(it, key=lambda child: child.name)
    except OSError as e:
        logger.debug("Cannot list %s: %s", root.path, e)
        return []
    return [
        entry for entry in (FileEntry.of(child, link_option=root.link_option) for child in children)
        if file_filter.test(entry)
    ]


def list_files(directory: Any,
               file_filter: Any = TRUE,
               dir_filter: Optional[Any] = TRUE,
               comparator: Optional[Any] = None,
               include_dirs: bool = False) -> List[FileEntry]:
    """Collect files below ``directory``.

    Args:
        directory: Root of the search
        file_filter: Filter applied to files
        dir_filter: Filter deciding which subdirectories to descend into;
                    None limits the search to the top level
        comparator: Optional FileComparator used to sort the result
        include_dirs: Also return the directories that were descended into

    Returns:
        List of FileEntry objects
    """
    if dir_filter is None:
        entries = list(walk(directory, file_filter=file_filter, max_depth=1,
                            include_dirs=include_dirs))
    else:
        entries = list(walk(directory,
                            file_filter=file_filter,
                            dir_filter=dir_filter,
                            include_dirs=include_dirs))
    if comparator is not None:
        entries = comparator.sort(entries)
    return entries


__all__ = [
    'size_of_directory',
    'list_dir',
    'list_files',
]
