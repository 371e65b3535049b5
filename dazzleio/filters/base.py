"""FileFilter abstraction for DazzleIO.

A filter answers one question about a filesystem entry. Concrete filters
implement only ``test``; the two public entry points - ``accept`` for plain
paths and ``accept_path`` for a path plus optional pre-fetched attributes -
both normalize their input into a FileEntry and delegate to it, so the
predicate logic exists exactly once per filter.
"""

import copy
import os
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..entry import FileEntry
from ..visit import VisitResult


class FileFilter(ABC):
    """Abstract base class for every file filter.

    Filters hold no mutable state after construction, so module-level
    singleton instances can be shared freely.

    Filters compose with operators::

        DIRECTORY | (FILE & SuffixFileFilter('.txt'))
        ~HIDDEN
    """

    on_accept: VisitResult = VisitResult.CONTINUE
    on_reject: VisitResult = VisitResult.TERMINATE

    @abstractmethod
    def test(self, entry: Optional[FileEntry]) -> bool:
        """Check a normalized entry.

        Implementations must return False for None and must not raise
        for an entry whose metadata is missing or unreadable.

        Args:
            entry: The entry to check, or None

        Returns:
            True if the entry matches
        """
        pass

    def accept(self, file: Any) -> bool:
        """Check a path, Path, DirEntry or FileEntry.

        Args:
            file: The file to check (None is never accepted)

        Returns:
            True if the file matches
        """
        return self.test(FileEntry.of(file))

    def accept_path(self, path: Any,
                    attributes: Optional[os.stat_result] = None) -> VisitResult:
        """Check a path for a tree walk.

        Supplied attributes are used as-is; otherwise they are fetched on
        demand, once, and only if this filter needs them.

        Args:
            path: The path to check
            attributes: The path's stat result, if already known

        Returns:
            on_accept if the path matches, on_reject otherwise
        """
        return self.to_visit_result(self.test(FileEntry.of(path, attributes)))

    def to_visit_result(self, matched: bool) -> VisitResult:
        """Translate a match into a traversal signal."""
        return VisitResult.of(matched, self.on_accept, self.on_reject)

    def as_exclusion(self) -> 'FileFilter':
        """Return a copy that continues on non-match and stops on match."""
        flipped = copy.copy(self)
        flipped.on_accept, flipped.on_reject = self.on_reject, self.on_accept
        return flipped

    def __call__(self, file: Any) -> bool:
        return self.accept(file)

    # Composition operators. Imported lazily to avoid a cycle with logical.

    def __and__(self, other) -> 'FileFilter':
        from .logical import AndFileFilter
        return AndFileFilter(self, other)

    def __or__(self, other) -> 'FileFilter':
        from .logical import OrFileFilter
        return OrFileFilter(self, other)

    def __invert__(self) -> 'FileFilter':
        from .logical import NotFileFilter
        return NotFileFilter(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
