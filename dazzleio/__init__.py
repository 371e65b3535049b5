"""DazzleIO - I/O utilities in the DazzleTreeLib family.

DazzleIO provides small, synchronous building blocks around the
filesystem and Python's stream classes:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Filters:
    from dazzleio.filters import DIRECTORY, SuffixFileFilter
    DIRECTORY | SuffixFileFilter('.txt')

Comparators:
    from dazzleio.comparators import SIZE_COMPARATOR
    SIZE_COMPARATOR.sort(paths)

Copying:
    from dazzleio.copying import copy
    copy(reader, byte_stream, encoding='utf-8')
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from . import filters
from . import comparators
from .config import IOConfig, LinkOption, DEFAULT_CONFIG
from .iocase import IOCase
from .entry import FileEntry
from .visit import VisitResult
from .walk import walk
from .files import size_of_directory, list_dir, list_files
from .copying import copy
from .output import AppendableOutputStream

# Library code logs; applications decide where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "filters",
    "comparators",
    "IOConfig",
    "LinkOption",
    "DEFAULT_CONFIG",
    "IOCase",
    "FileEntry",
    "VisitResult",
    "walk",
    "size_of_directory",
    "list_dir",
    "list_files",
    "copy",
    "AppendableOutputStream",
]
