"""Testing utilities for DazzleIO consumers."""

from .streams import (
    ThrowOnCloseInputStream,
    ThrowOnFlushAndCloseOutputStream,
    generate_test_data,
)

__all__ = [
    "ThrowOnCloseInputStream",
    "ThrowOnFlushAndCloseOutputStream",
    "generate_test_data",
]
