"""Output stream that appends written bytes to a text accumulator."""

import io
from typing import Any, Generic, TypeVar

T = TypeVar('T')


class AppendableOutputStream(io.RawIOBase, Generic[T]):
    """Byte stream that appends to ``appendable`` as text.

    Each byte is widened to the character with the same code point
    (ISO-8859-1), and appended immediately; nothing is buffered here.
    The accumulator may be anything with ``write(str)`` (``io.StringIO``,
    a text file) or ``append(str)`` (a list).

    ``flush`` and ``close`` do nothing, so the stream stays usable and the
    accumulator can be read at any time.

    Example:
        >>> out = AppendableOutputStream(io.StringIO())
        >>> out.write(b"ABC")
        3
        >>> out.appendable.getvalue()
        'ABC'
    """

    def __init__(self, appendable: T = None):
        super().__init__()
        if appendable is None:
            appendable = io.StringIO()
        if hasattr(appendable, 'write'):
            self._append = appendable.write
        elif hasattr(appendable, 'append'):
            self._append = appendable.append
        else:
            raise ValueError(f"{appendable!r} has neither write() nor append()")
        self._appendable = appendable

    @property
    def appendable(self) -> T:
        """The accumulator receiving the written text."""
        return self._appendable

    def writable(self) -> bool:
        return True

    def write(self, b: Any) -> int:
        """Append a single byte (an int) or a bytes-like object.

        Returns:
            Number of bytes written
        """
        if isinstance(b, int):
            self._append(chr(b & 0xFF))
            return 1
        data = bytes(b)
        if data:
            self._append(data.decode('latin-1'))
        return len(data)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass
