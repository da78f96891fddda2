"""
tests/test_hmac_sha3.py

One-shot HMAC-SHA3-256/512: message-before-key order, key reduction past the
rate, scratch buffer erasure and allocation failure.
"""

import hashlib
import hmac
from array import array

import pytest

import hmacpad.hmac_sha3 as hmac_sha3
from hashprim import SHA3_256, SHA3_512
from hmacpad import HMACAllocationError, hmac_sha3_256, hmac_sha3_512

FUNCTIONS = [
    (hmac_sha3_256, SHA3_256, "sha3_256"),
    (hmac_sha3_512, SHA3_512, "sha3_512"),
]


@pytest.mark.parametrize("function,family,name", FUNCTIONS)
@pytest.mark.parametrize("key_length", [0, 20, 64, 71, 72, 73, 135, 136, 137, 200])
def test_matches_reference(function, family, name, key_length):
    key = bytes((i * 5 + 11) & 0xFF for i in range(key_length))
    msg = b"what do ya want for nothing?"

    assert function(msg, key) == hmac.new(key, msg, name).digest()


@pytest.mark.parametrize("function,family,name", FUNCTIONS)
def test_message_comes_before_key(function, family, name):
    assert function(b"message", b"key") == hmac.new(b"key", b"message", name).digest()
    assert function(b"message", b"key") != function(b"key", b"message")


@pytest.mark.parametrize("function,family,name", FUNCTIONS)
def test_long_key_equals_prereduced_key(function, family, name):
    key = b"\xaa" * (family.BLOCK_LENGTH + 1)
    reduced = hashlib.new(name, key).digest()

    assert function(b"msg", key) == function(b"msg", reduced)


@pytest.mark.parametrize("function,family,name", FUNCTIONS)
def test_empty_inputs(function, family, name):
    assert function(b"", b"") == hmac.new(b"", b"", name).digest()
    assert len(function(b"", b"")) == family.DIGEST_LENGTH


def test_published_vector_131_byte_key():
    key = b"\xaa" * 131
    msg = b"Test Using Larger Than Block-Size Key - Hash Key First"
    assert hmac_sha3_256(msg, key).hex() == (
        "ed73a374b96c005235f948032f09674a58c0ce555cfc1f223b02356560312c3b")


def test_scratch_buffer_is_wiped(monkeypatch):
    allocated = []

    def recording_alloc(size):
        buf = bytearray(size)
        allocated.append(buf)
        return buf

    monkeypatch.setattr(hmac_sha3, "_alloc_scratch", recording_alloc)
    msg = b"confidential message"
    tag = hmac_sha3_512(msg, b"key")

    assert tag == hmac.new(b"key", msg, "sha3_512").digest()
    assert len(allocated) == 1
    assert len(allocated[0]) == len(msg) + hmac_sha3.MAX_DIGEST_BLOCK_LEN + 1
    assert not any(allocated[0])


def test_allocation_failure(monkeypatch):
    def failing_alloc(size):
        raise MemoryError

    monkeypatch.setattr(hmac_sha3, "_alloc_scratch", failing_alloc)

    with pytest.raises(HMACAllocationError) as e:
        hmac_sha3_256(b"msg", b"key")

    assert isinstance(e.value.__cause__, MemoryError)
    assert "allocation failed" in str(e.value)


def test_recovers_after_allocation_failure(monkeypatch):
    def failing_alloc(size):
        raise MemoryError

    monkeypatch.setattr(hmac_sha3, "_alloc_scratch", failing_alloc)
    with pytest.raises(HMACAllocationError):
        hmac_sha3_512(b"msg", b"key")
    monkeypatch.undo()

    assert hmac_sha3_512(b"msg", b"key") == hmac.new(b"key", b"msg", "sha3_512").digest()


def test_rejects_str_inputs():
    with pytest.raises(TypeError):
        hmac_sha3_256("msg", b"key")
    with pytest.raises(TypeError):
        hmac_sha3_256(b"msg", "key")


@pytest.mark.parametrize("function,family,name", FUNCTIONS)
def test_wide_memoryview_inputs_count_bytes(function, family, name):
    msg = memoryview(array("I", [1, 2, 3, 4]))
    key = memoryview(array("I", [5, 6]))

    assert function(msg, key) == hmac.new(key.tobytes(), msg.tobytes(), name).digest()


@pytest.mark.parametrize("function,family,name", FUNCTIONS)
def test_wide_memoryview_long_key_is_reduced(function, family, name):
    key = memoryview(array("Q", range(40)))
    assert function(b"msg", key) == hmac.new(key.tobytes(), b"msg", name).digest()
