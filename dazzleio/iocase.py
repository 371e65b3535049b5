"""Case sensitivity policy for name matching and ordering."""

import os
from enum import Enum


class IOCase(Enum):
    """Whether file name comparisons respect case.

    SYSTEM follows the host: insensitive on Windows, sensitive elsewhere.
    """
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"
    SYSTEM = "system"

    @property
    def is_case_sensitive(self) -> bool:
        if self is IOCase.SYSTEM:
            return os.name != 'nt'
        return self is IOCase.SENSITIVE

    def normalize(self, value: str) -> str:
        """Fold ``value`` according to this policy."""
        return value if self.is_case_sensitive else value.casefold()

    def equals(self, a: str, b: str) -> bool:
        return self.normalize(a) == self.normalize(b)

    def starts_with(self, value: str, prefix: str) -> bool:
        return self.normalize(value).startswith(self.normalize(prefix))

    def ends_with(self, value: str, suffix: str) -> bool:
        return self.normalize(value).endswith(self.normalize(suffix))

    def compare(self, a: str, b: str) -> int:
        """Three-way comparison returning -1, 0 or 1."""
        a, b = self.normalize(a), self.normalize(b)
        return (a > b) - (a < b)
