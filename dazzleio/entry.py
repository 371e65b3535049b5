"""Filesystem entry abstraction for DazzleIO.

Filters and comparators never look at raw paths directly. Every input,
whether a plain path string, a ``pathlib.Path``, an ``os.DirEntry`` from
``os.scandir`` or a path paired with a pre-fetched ``os.stat_result``, is
normalized into a FileEntry first. The entry is lazy: it performs at most
one metadata fetch, and only when an accessor actually needs it.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Any, Optional, Union

from .config import LinkOption

logger = logging.getLogger(__name__)

PathInput = Union[str, 'os.PathLike[str]']

# Sentinel marking "stat not attempted yet" (None means "attempted, failed")
_UNSET = object()


class FileEntry:
    """Normalized descriptor for a file or directory.

    Designed to be lightweight - most data is computed on demand and
    metadata errors collapse into sentinel values instead of exceptions.
    """

    def __init__(self,
                 path: PathInput,
                 stat_result: Optional[os.stat_result] = None,
                 link_option: LinkOption = LinkOption.FOLLOW,
                 dir_entry: Optional[os.DirEntry] = None):
        """Initialize a filesystem entry.

        Args:
            path: Path to the file or directory
            stat_result: Pre-fetched attributes; used as-is when supplied
            link_option: Whether attribute lookups follow symbolic links
            dir_entry: scandir entry whose cached stat can be reused
        """
        self.path = path if isinstance(path, Path) else Path(os.fspath(path))
        self.link_option = link_option
        self._dir_entry = dir_entry
        self._stat_result: Any = stat_result if stat_result is not None else _UNSET

    @classmethod
    def of(cls,
           value: Any,
           attributes: Optional[os.stat_result] = None,
           link_option: Optional[LinkOption] = None) -> Optional['FileEntry']:
        """Build an entry from any supported representation.

        Returns None for None so callers can reject it uniformly. An
        existing FileEntry is returned unchanged unless attributes are
        supplied alongside it.
        """
        if value is None:
            return None
        if link_option is None:
            link_option = LinkOption.from_flag(None)
        if isinstance(value, FileEntry):
            if attributes is None or attributes is value._stat_result:
                return value
            return cls(value.path, attributes, value.link_option)
        if isinstance(value, os.DirEntry):
            return cls(value.path, attributes, link_option, dir_entry=value)
        if hasattr(value, 'path') and not isinstance(value, (str, os.PathLike)):
            # Node-like objects that carry a path attribute
            return cls(value.path, attributes, link_option)
        return cls(value, attributes, link_option)

    # === Path-only accessors (no I/O) ===

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    @property
    def depth(self) -> int:
        """Number of components below the filesystem root."""
        parts = self.path.parts
        if self.path.anchor:
            return len(parts) - 1
        return len(parts)

    # === Metadata accessors ===

    def stat(self) -> Optional[os.stat_result]:
        """Return cached attributes, fetching them once if needed.

        Returns None when the entry does not exist or cannot be read.
        """
        if self._stat_result is _UNSET:
            self._stat_result = self._fetch_stat()
        return self._stat_result

    def _fetch_stat(self) -> Optional[os.stat_result]:
        follow = self.link_option.follow_symlinks
        try:
            if self._dir_entry is not None:
                return self._dir_entry.stat(follow_symlinks=follow)
            return os.stat(self.path, follow_symlinks=follow)
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.debug("Cannot read attributes of %s: %s", self.path, e)
            return None

    def exists(self) -> bool:
        return self.stat() is not None

    def is_dir(self) -> bool:
        st = self.stat()
        return st is not None and stat.S_ISDIR(st.st_mode)

    def is_file(self) -> bool:
        st = self.stat()
        return st is not None and stat.S_ISREG(st.st_mode)

    def is_symlink(self) -> bool:
        """Check the link itself, regardless of link_option."""
        st = self.stat()
        if st is not None and self.link_option is LinkOption.NOFOLLOW:
            return stat.S_ISLNK(st.st_mode)
        try:
            return self.path.is_symlink()
        except OSError as e:
            logger.debug("Cannot lstat %s: %s", self.path, e)
            return False

    def size(self) -> Optional[int]:
        """Length in bytes, or None if the entry is missing."""
        st = self.stat()
        return st.st_size if st is not None else None

    def modified_ns(self) -> Optional[int]:
        """Last-modified time in nanoseconds, or None if missing."""
        st = self.stat()
        return st.st_mtime_ns if st is not None else None

    def is_hidden(self) -> bool:
        """Dot-files, plus the hidden attribute on Windows."""
        if self.path.name.startswith('.'):
            return True
        if os.name == 'nt':
            st = self.stat()
            attrs = getattr(st, 'st_file_attributes', 0) if st is not None else 0
            return bool(attrs & getattr(stat, 'FILE_ATTRIBUTE_HIDDEN', 0))
        return False

    # Permissions (uses os.access, which always reflects the real user)

    def can_read(self) -> bool:
        return self._access(os.R_OK)

    def can_write(self) -> bool:
        return self._access(os.W_OK)

    def can_execute(self) -> bool:
        return self._access(os.X_OK)

    def _access(self, mode: int) -> bool:
        if not self.exists():
            return False
        try:
            return os.access(self.path, mode,
                             follow_symlinks=self.link_option.follow_symlinks)
        except NotImplementedError:
            return os.access(self.path, mode)
        except OSError as e:
            logger.debug("Cannot check access on %s: %s", self.path, e)
            return False

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileEntry):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"FileEntry(path={self.path!r})"
