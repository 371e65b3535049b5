"""File comparators for DazzleIO.

Every comparator comes with a precomputed reverse singleton. Use
``comparator.key`` with ``sorted`` or ``comparator.sort(files)``.
"""

from .base import FileComparator, ReverseComparator, CompositeComparator
from .name import (
    NameComparator,
    ExtensionComparator,
    PathComparator,
    get_extension,
    NAME_COMPARATOR,
    NAME_REVERSE,
    NAME_INSENSITIVE_COMPARATOR,
    NAME_INSENSITIVE_REVERSE,
    NAME_SYSTEM_COMPARATOR,
    NAME_SYSTEM_REVERSE,
    EXTENSION_COMPARATOR,
    EXTENSION_REVERSE,
    EXTENSION_INSENSITIVE_COMPARATOR,
    EXTENSION_INSENSITIVE_REVERSE,
    PATH_COMPARATOR,
    PATH_REVERSE,
    PATH_INSENSITIVE_COMPARATOR,
    PATH_INSENSITIVE_REVERSE,
)
from .depth import (
    DepthComparator,
    DirectoryComparator,
    DEPTH_COMPARATOR,
    DEPTH_REVERSE,
    DIRECTORY_COMPARATOR,
    DIRECTORY_REVERSE,
)
from .size import (
    SizeComparator,
    SIZE_COMPARATOR,
    SIZE_REVERSE,
    SIZE_SUMDIR_COMPARATOR,
    SIZE_SUMDIR_REVERSE,
)
from .modified import (
    LastModifiedComparator,
    LASTMODIFIED_COMPARATOR,
    LASTMODIFIED_REVERSE,
)

__all__ = [
    'FileComparator',
    'ReverseComparator',
    'CompositeComparator',
    'NameComparator',
    'ExtensionComparator',
    'PathComparator',
    'get_extension',
    'NAME_COMPARATOR',
    'NAME_REVERSE',
    'NAME_INSENSITIVE_COMPARATOR',
    'NAME_INSENSITIVE_REVERSE',
    'NAME_SYSTEM_COMPARATOR',
    'NAME_SYSTEM_REVERSE',
    'EXTENSION_COMPARATOR',
    'EXTENSION_REVERSE',
    'EXTENSION_INSENSITIVE_COMPARATOR',
    'EXTENSION_INSENSITIVE_REVERSE',
    'PATH_COMPARATOR',
    'PATH_REVERSE',
    'PATH_INSENSITIVE_COMPARATOR',
    'PATH_INSENSITIVE_REVERSE',
    'DepthComparator',
    'DirectoryComparator',
    'DEPTH_COMPARATOR',
    'DEPTH_REVERSE',
    'DIRECTORY_COMPARATOR',
    'DIRECTORY_REVERSE',
    'SizeComparator',
    'SIZE_COMPARATOR',
    'SIZE_REVERSE',
    'SIZE_SUMDIR_COMPARATOR',
    'SIZE_SUMDIR_REVERSE',
    'LastModifiedComparator',
    'LASTMODIFIED_COMPARATOR',
    'LASTMODIFIED_REVERSE',
]
