"""Tests for AppendableOutputStream."""

import io

import pytest

from dazzleio.copying import copy_stream
from dazzleio.output import AppendableOutputStream


def test_write_single_byte():
    out = AppendableOutputStream(io.StringIO())
    assert out.write(ord('F')) == 1
    assert out.appendable.getvalue() == "F"


def test_write_bytes():
    out = AppendableOutputStream(io.StringIO())
    assert out.write(b"ABCD") == 4
    assert out.appendable.getvalue() == "ABCD"


def test_write_byte_values():
    out = AppendableOutputStream(io.StringIO())
    out.write(bytes([0x41, 0x42, 0x43]))
    assert out.appendable.getvalue() == "ABC"


def test_default_accumulator_is_string_buffer():
    out = AppendableOutputStream()
    out.write(b"xy")
    assert out.appendable.getvalue() == "xy"


def test_list_accumulator():
    parts = []
    out = AppendableOutputStream(parts)
    out.write(b"ab")
    out.write(ord('c'))
    assert "".join(parts) == "abc"
    assert out.appendable is parts


def test_high_bytes_map_to_same_code_point():
    out = AppendableOutputStream(io.StringIO())
    out.write(b"\xe9")
    out.write(0xFF)
    assert out.appendable.getvalue() == "éÿ"


def test_flush_and_close_are_no_ops():
    out = AppendableOutputStream(io.StringIO())
    out.write(b"a")
    out.flush()
    out.close()
    out.write(b"b")
    assert out.appendable.getvalue() == "ab"


def test_empty_write():
    out = AppendableOutputStream(io.StringIO())
    assert out.write(b"") == 0
    assert out.appendable.getvalue() == ""


def test_usable_as_copy_destination():
    out = AppendableOutputStream(io.StringIO())
    assert copy_stream(io.BytesIO(b"hello"), out) == 5
    assert out.appendable.getvalue() == "hello"


def test_rejects_bad_accumulator():
    with pytest.raises(ValueError):
        AppendableOutputStream(42)
