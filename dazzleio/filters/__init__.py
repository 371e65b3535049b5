"""File filters for DazzleIO.

Filters are predicates over filesystem entries. They accept plain paths
(``accept``) or a path with pre-fetched attributes (``accept_path``), and
compose with ``&``, ``|`` and ``~``.
"""

from .base import FileFilter
from .attributes import (
    DirectoryFileFilter,
    FileFileFilter,
    SymbolicLinkFileFilter,
    HiddenFileFilter,
    EmptyFileFilter,
    SizeFileFilter,
    AgeFileFilter,
    DIRECTORY,
    INSTANCE,
    FILE,
    SYMBOLIC_LINK,
    HIDDEN,
    VISIBLE,
    EMPTY,
    NOT_EMPTY,
)
from .names import (
    NameFileFilter,
    PrefixFileFilter,
    SuffixFileFilter,
    WildcardFileFilter,
    suffixes,
)
from .permissions import (
    CanReadFileFilter,
    CanWriteFileFilter,
    CanExecuteFileFilter,
    CAN_READ,
    CANNOT_READ,
    CAN_WRITE,
    CANNOT_WRITE,
    CAN_EXECUTE,
    CANNOT_EXECUTE,
    READ_ONLY,
)
from .logical import (
    TrueFileFilter,
    FalseFileFilter,
    DelegateFileFilter,
    AndFileFilter,
    OrFileFilter,
    NotFileFilter,
    TRUE,
    FALSE,
)
from .utils import (
    and_filter,
    or_filter,
    not_filter,
    as_filter,
    size_range_filter,
    suffix_file_filter,
    make_directory_only,
    make_file_only,
    make_vcs_aware,
    iter_filtered,
    filter_files,
)

__all__ = [
    # Base
    'FileFilter',
    # Attributes
    'DirectoryFileFilter',
    'FileFileFilter',
    'SymbolicLinkFileFilter',
    'HiddenFileFilter',
    'EmptyFileFilter',
    'SizeFileFilter',
    'AgeFileFilter',
    'DIRECTORY',
    'INSTANCE',
    'FILE',
    'SYMBOLIC_LINK',
    'HIDDEN',
    'VISIBLE',
    'EMPTY',
    'NOT_EMPTY',
    # Names
    'NameFileFilter',
    'PrefixFileFilter',
    'SuffixFileFilter',
    'WildcardFileFilter',
    'suffixes',
    # Permissions
    'CanReadFileFilter',
    'CanWriteFileFilter',
    'CanExecuteFileFilter',
    'CAN_READ',
    'CANNOT_READ',
    'CAN_WRITE',
    'CANNOT_WRITE',
    'CAN_EXECUTE',
    'CANNOT_EXECUTE',
    'READ_ONLY',
    # Logical
    'TrueFileFilter',
    'FalseFileFilter',
    'DelegateFileFilter',
    'AndFileFilter',
    'OrFileFilter',
    'NotFileFilter',
    'TRUE',
    'FALSE',
    # Helpers
    'and_filter',
    'or_filter',
    'not_filter',
    'as_filter',
    'size_range_filter',
    'suffix_file_filter',
    'make_directory_only',
    'make_file_only',
    'make_vcs_aware',
    'iter_filtered',
    'filter_files',
]
