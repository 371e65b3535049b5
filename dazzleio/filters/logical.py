"""Logical composition of filters.

Combinators own an immutable, insertion-ordered tuple of children and
evaluate them lazily, stopping at the first decisive result.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from ..entry import FileEntry
from .base import FileFilter

logger = logging.getLogger(__name__)


class TrueFileFilter(FileFilter):
    """Accepts every non-None entry."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        return entry is not None

    def __and__(self, other) -> FileFilter:
        return _as_filter(other)

    def __invert__(self) -> FileFilter:
        return FALSE


class FalseFileFilter(FileFilter):
    """Rejects everything."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        return False

    def __or__(self, other) -> FileFilter:
        return _as_filter(other)

    def __invert__(self) -> FileFilter:
        return TRUE


class DelegateFileFilter(FileFilter):
    """Adapts a plain callable ``func(path: Path) -> bool`` into a filter.

    An OSError raised by the callable counts as a non-match; any other
    exception propagates.
    """

    def __init__(self, func: Callable[[Any], bool]):
        if func is None or not callable(func):
            raise ValueError(f"The delegate must be callable, got {func!r}")
        self.func = func

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        try:
            return bool(self.func(entry.path))
        except OSError as e:
            logger.debug("Delegate filter failed on %s: %s", entry.path, e)
            return False

    def __repr__(self) -> str:
        return f"DelegateFileFilter({self.func!r})"


def _as_filter(value: Any) -> FileFilter:
    if isinstance(value, FileFilter):
        return value
    if value is None:
        raise ValueError("A filter must not be None")
    if callable(value):
        return DelegateFileFilter(value)
    raise ValueError(f"Not a filter: {value!r}")


def _children(filters: Tuple) -> Tuple[FileFilter, ...]:
    """Accept ``f1, f2, ...`` or a single list/tuple of filters."""
    if len(filters) == 1 and isinstance(filters[0], (list, tuple)):
        filters = tuple(filters[0])
    return tuple(_as_filter(f) for f in filters)


class _CompositeFileFilter(FileFilter):
    """Shared construction for And/Or."""

    def __init__(self, *filters):
        self.filters = _children(filters)

    @classmethod
    def of(cls, filters: Iterable[Any]):
        return cls(list(filters))

    def with_filter(self, file_filter: Any):
        """Return a new combinator with ``file_filter`` appended."""
        return type(self)(list(self.filters) + [file_filter])

    def __len__(self) -> int:
        return len(self.filters)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(map(repr, self.filters))})"


class AndFileFilter(_CompositeFileFilter):
    """Accepts when every child accepts; an empty And accepts."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        for child in self.filters:
            if not child.test(entry):
                return False
        return True


class OrFileFilter(_CompositeFileFilter):
    """Accepts when any child accepts; an empty Or rejects."""

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        for child in self.filters:
            if child.test(entry):
                return True
        return False


class NotFileFilter(FileFilter):
    """Negates exactly one child.

    None is still rejected: negation never lets a missing entry through.
    """

    def __init__(self, file_filter: Any):
        self.filter = _as_filter(file_filter)

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        return not self.filter.test(entry)

    def __invert__(self) -> FileFilter:
        return self.filter

    def __repr__(self) -> str:
        return f"NotFileFilter({self.filter!r})"


TRUE = TrueFileFilter()
FALSE = FalseFileFilter()
