"""Stream test doubles for DazzleIO consumers.

These wrappers make "this helper must not close / must not flush" checks
explicit: they raise instead of silently recording the call.
"""

import io
from typing import BinaryIO


def generate_test_data(size: int) -> bytes:
    """Deterministic test payload of ``size`` bytes.

    Values cycle through printable ASCII so the data is valid in any
    ASCII-compatible encoding.
    """
    return bytes(32 + (i % 95) for i in range(size))


class ThrowOnCloseInputStream(io.RawIOBase):
    """Readable byte stream that raises if anyone closes it.

    Example:
        in_ = ThrowOnCloseInputStream(io.BytesIO(data))
        copy_stream(in_, out)      # would fail if copy_stream closed it
    """

    def __init__(self, delegate: BinaryIO):
        super().__init__()
        self._delegate = delegate

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        data = self._delegate.read(len(buffer))
        buffer[:len(data)] = data
        return len(data)

    def available(self) -> int:
        """Bytes left before EOF, when the delegate is seekable."""
        position = self._delegate.tell()
        end = self._delegate.seek(0, io.SEEK_END)
        self._delegate.seek(position)
        return end - position

    def close(self) -> None:
        raise OSError("close() called on ThrowOnCloseInputStream")

    def __del__(self):
        # RawIOBase.__del__ would call close()
        pass


class ThrowOnFlushAndCloseOutputStream(io.RawIOBase):
    """Writable byte stream that raises on flush and/or close.

    Args:
        delegate: Stream receiving the written bytes
        throw_on_flush: Raise from flush()
        throw_on_close: Raise from close()
    """

    def __init__(self, delegate: BinaryIO,
                 throw_on_flush: bool = True,
                 throw_on_close: bool = True):
        super().__init__()
        self._delegate = delegate
        self.throw_on_flush = throw_on_flush
        self.throw_on_close = throw_on_close
        self.flush_count = 0

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        return self._delegate.write(b)

    def flush(self) -> None:
        if self.throw_on_flush:
            raise OSError("flush() called on ThrowOnFlushAndCloseOutputStream")
        self.flush_count += 1
        self._delegate.flush()

    def off(self) -> None:
        """Stop raising, e.g. before handing the stream to cleanup code."""
        self.throw_on_flush = False
        self.throw_on_close = False

    def close(self) -> None:
        if self.throw_on_close:
            raise OSError("close() called on ThrowOnFlushAndCloseOutputStream")
        self._delegate.close()

    def __del__(self):
        pass
