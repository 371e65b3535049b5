"""Tests for IOConfig, LinkOption and IOCase."""

import pytest

from dazzleio.config import DEFAULT_CONFIG, IOConfig, LinkOption
from dazzleio.iocase import IOCase


def test_defaults():
    assert DEFAULT_CONFIG.buffer_size == 4096
    assert DEFAULT_CONFIG.encoding == "utf-8"
    assert DEFAULT_CONFIG.link_option is LinkOption.FOLLOW


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.buffer_size = 1


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        IOConfig(buffer_size=size)


def test_empty_encoding_rejected():
    with pytest.raises(ValueError):
        IOConfig(encoding="")


def test_with_overrides_leaves_original_untouched():
    small = DEFAULT_CONFIG.with_overrides(buffer_size=16, follow_links=False)
    assert small.buffer_size == 16
    assert small.link_option is LinkOption.NOFOLLOW
    assert DEFAULT_CONFIG.buffer_size == 4096


def test_resolve_encoding():
    assert DEFAULT_CONFIG.resolve_encoding(None) == "utf-8"
    assert DEFAULT_CONFIG.resolve_encoding("ascii") == "ascii"


def test_link_option_from_flag():
    assert LinkOption.from_flag(None) is LinkOption.FOLLOW
    assert LinkOption.from_flag(True) is LinkOption.FOLLOW
    assert LinkOption.from_flag(False) is LinkOption.NOFOLLOW
    assert LinkOption.NOFOLLOW.follow_symlinks is False


def test_iocase():
    assert IOCase.SENSITIVE.equals("a", "a")
    assert not IOCase.SENSITIVE.equals("a", "A")
    assert IOCase.INSENSITIVE.equals("a", "A")
    assert IOCase.INSENSITIVE.starts_with("README.md", "read")
    assert IOCase.INSENSITIVE.ends_with("photo.JPG", ".jpg")
    assert IOCase.SENSITIVE.compare("B", "a") == -1
    assert IOCase.INSENSITIVE.compare("B", "a") == 1
    assert IOCase.INSENSITIVE.compare("abc", "ABC") == 0
