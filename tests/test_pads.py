"""
tests/test_pads.py

Pad derivation and buffer erasure.
"""

from array import array

import pytest

from hmacpad.pads import IPAD_BYTE, OPAD_BYTE, build_pads, wipe, wipe_words


def test_short_key_is_zero_extended():
    inner, outer = build_pads(b"\x01\x02", 8)

    assert inner == bytearray([0x37, 0x34, 0x36, 0x36, 0x36, 0x36, 0x36, 0x36])
    assert outer == bytearray([0x5d, 0x5e, 0x5c, 0x5c, 0x5c, 0x5c, 0x5c, 0x5c])


def test_empty_key_gives_constant_pads():
    inner, outer = build_pads(b"", 16)

    assert inner == bytearray([IPAD_BYTE]) * 16
    assert outer == bytearray([OPAD_BYTE]) * 16


def test_key_len_limits_bytes_used():
    key_buffer = bytearray(b"abc") + bytearray(13)
    inner, _ = build_pads(key_buffer, 16, key_len=2)

    assert inner[:2] == bytearray([ord("a") ^ 0x36, ord("b") ^ 0x36])
    assert inner[2:] == bytearray([0x36]) * 14


def test_key_longer_than_pad_is_truncated():
    inner, outer = build_pads(b"\xff" * 10, 4)

    assert len(inner) == len(outer) == 4
    assert inner == bytearray([0xff ^ 0x36]) * 4


def test_pads_are_xor_related():
    inner, outer = build_pads(b"some secret key", 64)
    assert all((i ^ o) == (IPAD_BYTE ^ OPAD_BYTE) for i, o in zip(inner, outer))


def test_build_pads_rejects_str_key():
    with pytest.raises(TypeError):
        build_pads("key", 64)


def test_wipe_bytearray_and_memoryview():
    buf = bytearray(b"secret")
    wipe(buf)
    assert buf == bytearray(6)

    backing = bytearray(b"secret")
    wipe(memoryview(backing))
    assert backing == bytearray(6)


def test_wipe_leaves_immutable_alone():
    data = b"secret"
    wipe(data)
    wipe(None)
    assert data == b"secret"


def test_wipe_words():
    words = [1, 2, 3]
    wipe_words(words)
    wipe_words(None)
    assert words == [0, 0, 0]


def test_wide_memoryview_key_uses_bytes():
    key = memoryview(array("I", [0x01020304]))
    inner, _ = build_pads(key, 8)

    assert inner[:4] == bytearray(b ^ 0x36 for b in key.tobytes())
    assert inner[4:] == bytearray([0x36]) * 4


def test_key_len_past_key_is_rejected():
    with pytest.raises(ValueError) as e:
        build_pads(b"abc", 16, key_len=4)
    assert "key_len" in str(e.value)

    with pytest.raises(ValueError):
        build_pads(b"abc", 16, key_len=-1)
