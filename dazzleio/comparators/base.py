"""FileComparator abstraction for DazzleIO.

Comparators order filesystem entries. Subclasses implement ``_compare`` on
normalized FileEntry values; the public ``compare`` accepts anything
FileEntry.of understands and always returns exactly -1, 0 or 1.
"""

import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List

from ..entry import FileEntry


def sign(value) -> int:
    """Collapse any ordering value to -1, 0 or 1."""
    return (value > 0) - (value < 0)


class FileComparator(ABC):
    """Abstract base class for file comparators.

    Comparators hold no mutable state (the optional size cache aside), so
    the module-level singletons can be shared.
    """

    @abstractmethod
    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        """Compare two normalized entries.

        Args:
            a: First entry
            b: Second entry

        Returns:
            Negative, zero or positive, like a classic cmp function
        """
        pass

    def compare(self, a: Any, b: Any) -> int:
        """Compare two files.

        Returns:
            -1 if a sorts first, 1 if b sorts first, 0 if equal
        """
        return sign(self._compare(_entry(a), _entry(b)))

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    @property
    def key(self) -> Callable[[Any], Any]:
        """Sort key usable with ``sorted`` and ``list.sort``."""
        return functools.cmp_to_key(self.compare)

    def sort(self, files: Iterable[Any]) -> List[Any]:
        """Return a new list of ``files`` in this comparator's order.

        The sort is stable. None items are not allowed.
        """
        # Normalize once so pre-fetched attributes are reused across compares
        pairs = [(_entry(item), item) for item in files]
        entry_key = functools.cmp_to_key(self._compare)
        pairs.sort(key=lambda pair: entry_key(pair[0]))
        return [item for _, item in pairs]

    def reversed(self) -> 'FileComparator':
        """Return a comparator with the opposite order."""
        return ReverseComparator(self)

    def then(self, other: 'FileComparator') -> 'CompositeComparator':
        """Break ties of this comparator with ``other``."""
        return CompositeComparator(self, other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def _entry(value: Any) -> FileEntry:
    entry = FileEntry.of(value)
    if entry is None:
        raise ValueError("Cannot compare None")
    return entry


class ReverseComparator(FileComparator):
    """Delegating wrapper that negates another comparator."""

    def __init__(self, delegate: FileComparator):
        if delegate is None:
            raise ValueError("The delegate comparator must not be None")
        self.delegate = delegate

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        result = sign(self.delegate._compare(a, b))
        return 0 if result == 0 else -result

    def reversed(self) -> FileComparator:
        return self.delegate

    def __repr__(self) -> str:
        return f"ReverseComparator({self.delegate!r})"


class CompositeComparator(FileComparator):
    """Applies comparators in order; the first non-zero result wins."""

    def __init__(self, *comparators: FileComparator):
        if len(comparators) == 1 and isinstance(comparators[0], (list, tuple)):
            comparators = tuple(comparators[0])
        for comparator in comparators:
            if comparator is None:
                raise ValueError("A comparator must not be None")
        self.comparators = tuple(comparators)

    def _compare(self, a: FileEntry, b: FileEntry) -> int:
        for comparator in self.comparators:
            result = comparator._compare(a, b)
            if result != 0:
                return result
        return 0

    def __repr__(self) -> str:
        return f"CompositeComparator({', '.join(map(repr, self.comparators))})"
