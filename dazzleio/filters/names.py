"""Filters on the entry name.

These filters look only at the final path component and never touch the
filesystem, so they are safe to run on paths that do not exist.
"""

import fnmatch
import re
from typing import Optional, Tuple

from ..entry import FileEntry
from ..iocase import IOCase
from .base import FileFilter


def _collect(values: Tuple, what: str) -> Tuple[str, ...]:
    """Flatten ``*values`` (allowing a single iterable) and validate."""
    if len(values) == 1 and values[0] is not None and not isinstance(values[0], str):
        try:
            values = tuple(values[0])
        except TypeError:
            raise ValueError(f"Invalid {what}: {values[0]!r}") from None
    if not values:
        raise ValueError(f"At least one {what} is required")
    for value in values:
        if value is None:
            raise ValueError(f"The {what} list must not contain None")
        if not isinstance(value, str):
            raise ValueError(f"Invalid {what}: {value!r}")
    return tuple(values)


class _NameFilter(FileFilter):
    """Shared plumbing for filters that match names against values."""

    kind = "value"

    def __init__(self, *values: str, case: IOCase = IOCase.SENSITIVE):
        self.values = _collect(values, self.kind)
        self.case = case or IOCase.SENSITIVE

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        name = entry.name
        return any(self._matches(name, value) for value in self.values)

    def _matches(self, name: str, value: str) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(map(repr, self.values))}, case={self.case.name})"


class NameFileFilter(_NameFilter):
    """Accepts entries whose name equals one of the given names."""

    kind = "name"

    def _matches(self, name: str, value: str) -> bool:
        return self.case.equals(name, value)


class PrefixFileFilter(_NameFilter):
    """Accepts entries whose name starts with one of the given prefixes."""

    kind = "prefix"

    def _matches(self, name: str, value: str) -> bool:
        return self.case.starts_with(name, value)


class SuffixFileFilter(_NameFilter):
    """Accepts entries whose name ends with one of the given suffixes."""

    kind = "suffix"

    def _matches(self, name: str, value: str) -> bool:
        return self.case.ends_with(name, value)


class WildcardFileFilter(_NameFilter):
    """Accepts entries whose name matches a ``*`` / ``?`` pattern.

    Patterns are compiled once; ``[...]`` classes work as in fnmatch.
    """

    kind = "pattern"

    def __init__(self, *patterns: str, case: IOCase = IOCase.SENSITIVE):
        super().__init__(*patterns, case=case)
        flags = 0 if self.case.is_case_sensitive else re.IGNORECASE
        self._compiled = tuple(
            re.compile(fnmatch.translate(pattern), flags) for pattern in self.values
        )

    def test(self, entry: Optional[FileEntry]) -> bool:
        if entry is None:
            return False
        name = entry.name
        return any(regex.match(name) for regex in self._compiled)


def suffixes(*extensions: str, case: IOCase = IOCase.SENSITIVE) -> SuffixFileFilter:
    """Suffix filter from bare extensions: ``suffixes('py', 'txt')``."""
    values = _collect(extensions, "extension")
    return SuffixFileFilter(
        [ext if ext.startswith('.') else '.' + ext for ext in values], case=case
    )
