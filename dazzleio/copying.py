"""Stream copy helpers.

Copy between bytes, str, byte streams (``io.RawIOBase`` /
``io.BufferedIOBase``) and text streams (``io.TextIOBase``). The source is
read to exhaustion in ``IOConfig.buffer_size`` chunks and every unit read
is written.

None of these helpers closes either endpoint. Only the helpers that turn
characters into bytes (``copy_reader_to_stream`` and ``copy_string``)
flush the destination; everything else leaves flushing to the caller.
I/O errors propagate unchanged.
"""

import codecs
import io
from typing import Any, BinaryIO, Iterator, Optional, TextIO, Union

from .config import DEFAULT_CONFIG, IOConfig

BytesLike = Union[bytes, bytearray, memoryview]


def _read_chunks(source: Any, size: int) -> Iterator[Any]:
    while True:
        chunk = source.read(size)
        if not chunk:
            return
        yield chunk


def _write_all(output: Any, data: BytesLike) -> None:
    # Raw streams may accept only part of the buffer per call
    view = memoryview(data).cast('B')
    while view:
        written = output.write(view)
        if written is None:
            written = 0
        view = view[written:]


# bytes -> ...

def copy_bytes(data: BytesLike, output: BinaryIO) -> None:
    """Write ``data`` to a byte stream."""
    _write_all(output, data)


def copy_bytes_to_writer(data: BytesLike,
                         writer: TextIO,
                         encoding: Optional[str] = None,
                         config: IOConfig = DEFAULT_CONFIG) -> None:
    """Decode ``data`` and write the text to ``writer``."""
    writer.write(bytes(data).decode(config.resolve_encoding(encoding), config.errors))


# byte stream -> ...

def copy_stream(input: BinaryIO, output: BinaryIO,
                config: IOConfig = DEFAULT_CONFIG) -> int:
    """Copy a byte stream to another byte stream.

    Returns:
        Number of bytes copied
    """
    count = 0
    for chunk in _read_chunks(input, config.buffer_size):
        _write_all(output, chunk)
        count += len(chunk)
    return count


def copy_stream_to_writer(input: BinaryIO,
                          writer: TextIO,
                          encoding: Optional[str] = None,
                          config: IOConfig = DEFAULT_CONFIG) -> None:
    """Decode a byte stream into ``writer``.

    Multi-byte sequences split across chunk boundaries are reassembled.
    """
    decoder = codecs.getincrementaldecoder(config.resolve_encoding(encoding))(config.errors)
    for chunk in _read_chunks(input, config.buffer_size):
        text = decoder.decode(chunk)
        if text:
            writer.write(text)
    tail = decoder.decode(b'', final=True)
    if tail:
        writer.write(tail)


# text stream -> ...

def copy_reader(reader: TextIO, writer: TextIO,
                config: IOConfig = DEFAULT_CONFIG) -> int:
    """Copy a text stream to another text stream.

    Returns:
        Number of characters copied
    """
    count = 0
    for chunk in _read_chunks(reader, config.buffer_size):
        writer.write(chunk)
        count += len(chunk)
    return count


def copy_reader_to_stream(reader: TextIO,
                          output: BinaryIO,
                          encoding: Optional[str] = None,
                          config: IOConfig = DEFAULT_CONFIG) -> None:
    """Encode a text stream into a byte stream, then flush ``output``."""
    encoder = codecs.getincrementalencoder(config.resolve_encoding(encoding))(config.errors)
    for chunk in _read_chunks(reader, config.buffer_size):
        data = encoder.encode(chunk)
        if data:
            _write_all(output, data)
    tail = encoder.encode('', final=True)
    if tail:
        _write_all(output, tail)
    output.flush()


# str -> ...

def copy_string(text: str,
                output: BinaryIO,
                encoding: Optional[str] = None,
                config: IOConfig = DEFAULT_CONFIG) -> None:
    """Encode ``text`` into a byte stream, then flush ``output``."""
    _write_all(output, text.encode(config.resolve_encoding(encoding), config.errors))
    output.flush()


def copy_string_to_writer(text: str, writer: TextIO) -> None:
    writer.write(text)


# Dispatch

def _is_text_stream(stream: Any) -> bool:
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    mode = getattr(stream, 'mode', None)
    if isinstance(mode, str):
        return 'b' not in mode
    raise TypeError(f"Cannot tell whether {stream!r} is a byte or a text stream")


def copy(source: Any,
         destination: Any,
         encoding: Optional[str] = None,
         config: Optional[IOConfig] = None) -> Optional[int]:
    """Copy ``source`` to ``destination``, choosing the helper by type.

    Args:
        source: bytes-like, str, byte stream or text stream
        destination: Byte stream or text stream
        encoding: Charset used when bytes and text meet
        config: Overrides DEFAULT_CONFIG

    Returns:
        The unit count for stream->stream and text->text copies, else None

    Raises:
        TypeError: If the pair of types is not supported
    """
    config = config or DEFAULT_CONFIG
    if source is None or destination is None:
        raise TypeError("source and destination must not be None")
    text_out = _is_text_stream(destination)

    if isinstance(source, (bytes, bytearray, memoryview)):
        if text_out:
            return copy_bytes_to_writer(source, destination, encoding, config)
        return copy_bytes(source, destination)
    if isinstance(source, str):
        if text_out:
            return copy_string_to_writer(source, destination)
        return copy_string(source, destination, encoding, config)
    if not hasattr(source, 'read'):
        raise TypeError(f"Unsupported copy source: {source!r}")
    if _is_text_stream(source):
        if text_out:
            return copy_reader(source, destination, config)
        return copy_reader_to_stream(source, destination, encoding, config)
    if text_out:
        return copy_stream_to_writer(source, destination, encoding, config)
    return copy_stream(source, destination, config)


__all__ = [
    'copy',
    'copy_bytes',
    'copy_bytes_to_writer',
    'copy_stream',
    'copy_stream_to_writer',
    'copy_reader',
    'copy_reader_to_stream',
    'copy_string',
    'copy_string_to_writer',
]
