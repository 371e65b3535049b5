"""Configuration system for DazzleIO.

This module defines the library-wide defaults used by the copy helpers
and by filesystem entries: chunk size, text encoding, and how symbolic
links are treated when metadata is looked up.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class LinkOption(Enum):
    """How symbolic links are treated when reading entry attributes.

    FOLLOW is the default everywhere in DazzleIO. NOFOLLOW must be
    requested explicitly.
    """
    FOLLOW = "follow"        # stat() the link target
    NOFOLLOW = "nofollow"    # lstat() the link itself

    @property
    def follow_symlinks(self) -> bool:
        """Value to pass as ``follow_symlinks`` to ``os.stat``."""
        return self is LinkOption.FOLLOW

    @classmethod
    def from_flag(cls, follow_links: Optional[bool]) -> 'LinkOption':
        """Map a boolean flag to a LinkOption (None means the default)."""
        if follow_links is None:
            return DEFAULT_CONFIG.link_option
        return cls.FOLLOW if follow_links else cls.NOFOLLOW


@dataclass(frozen=True)
class IOConfig:
    """Library defaults.

    Frozen so a single instance can be shared by every caller; use
    ``with_overrides`` to derive a variant.
    """

    buffer_size: int = 4096       # Chunk size for stream copies
    encoding: str = "utf-8"       # Charset used when none is given
    errors: str = "strict"        # Codec error handler
    follow_links: bool = True     # Attribute lookups follow symlinks

    def __post_init__(self):
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")

    @property
    def link_option(self) -> LinkOption:
        return LinkOption.FOLLOW if self.follow_links else LinkOption.NOFOLLOW

    def resolve_encoding(self, encoding: Optional[str]) -> str:
        """Return ``encoding`` or the configured default."""
        return encoding or self.encoding

    def with_overrides(self, **changes) -> 'IOConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = IOConfig()

__all__ = [
    'IOConfig',
    'LinkOption',
    'DEFAULT_CONFIG',
]
