"""
HMAC key pads and erasure of confidential buffers.

    inner_pad = K' ^ ipad    (ipad = 0x36 repeated)
    outer_pad = K' ^ opad    (opad = 0x5c repeated)

K' is the key zero-extended to the pad length. Reducing a key that is longer
than the block (hashing it first) is left to the caller, because only the
caller knows which hash family is in use.

Python bytes objects are immutable and cannot be erased, so everything
confidential is built in bytearrays and cleared with wipe() when done.
"""

from typing import List, Optional, Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview]

IPAD_BYTE = 0x36
OPAD_BYTE = 0x5c


def check_bytes(value, name: str) -> BytesLike:
    """
    Raise TypeError unless value is bytes-like.

    Returns value with memoryviews cast to unsigned bytes, so len() counts
    bytes whatever the item format of the underlying buffer.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    if isinstance(value, memoryview) and (value.format != "B" or value.ndim != 1):
        return value.cast("B")
    return value


def build_pads(key: BytesLike, block_len: int,
               key_len: Optional[int] = None) -> Tuple[bytearray, bytearray]:
    """
    Derive the inner and outer pads from a key.

    Args:
        key: Key bytes, already reduced to a digest if it was too long
        block_len: Length of both pads
        key_len: Number of key bytes to use (defaults to len(key)); lets the
            caller pass a fixed-size key buffer

    Returns:
        (inner_pad, outer_pad), each block_len bytes
    """
    key = check_bytes(key, "Key")
    if key_len is None:
        key_len = len(key)
    elif key_len < 0 or key_len > len(key):
        raise ValueError(f"key_len must be between 0 and {len(key)}, got {key_len}")

    inner_pad = bytearray([IPAD_BYTE]) * block_len
    outer_pad = bytearray([OPAD_BYTE]) * block_len

    for i in range(min(key_len, block_len)):
        inner_pad[i] ^= key[i]
        outer_pad[i] ^= key[i]

    return inner_pad, outer_pad


def wipe(buffer: Optional[BytesLike]) -> None:
    """
    Overwrite a mutable buffer with zeros in place.

    bytes and read-only memoryviews cannot be written and are left alone;
    None is accepted so callers can wipe buffers that were never allocated.
    """
    if buffer is None:
        return
    if isinstance(buffer, bytearray):
        buffer[:] = bytes(len(buffer))
    elif isinstance(buffer, memoryview) and not buffer.readonly:
        buffer.cast('B')[:] = bytes(buffer.nbytes)


def wipe_words(words: Optional[List[int]]) -> None:
    """Zero a list of integer words in place."""
    if words is None:
        return
    for i in range(len(words)):
        words[i] = 0
