"""Output stream decorators."""

from .appendable import AppendableOutputStream

__all__ = [
    "AppendableOutputStream",
]
