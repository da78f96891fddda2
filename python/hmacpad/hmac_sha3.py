#!/usr/bin/env python3
"""
HMAC-SHA3-256 / HMAC-SHA3-512 (one-shot).

    TAG = SHA3((K' ^ opad) || SHA3((K' ^ ipad) || message))

- K' is the key, or SHA3(key) when the key is longer than the rate
- Pads are built to MAX_DIGEST_BLOCK_LEN; only the first BLOCK_LENGTH
  bytes of each are hashed
- The inner input is assembled in a per-call scratch buffer sized
  len(message) + MAX_DIGEST_BLOCK_LEN + 1

Note the argument order: message first, then key.
"""

import logging
from typing import Type

from hashprim.sha3 import MAX_DIGEST_BLOCK_LEN, SHA3_256, SHA3_512, _SHA3

from .errors import HMACAllocationError
from .pads import BytesLike, build_pads, check_bytes, wipe

logger = logging.getLogger(__name__)


def _alloc_scratch(size: int) -> bytearray:
    return bytearray(size)


def _hmac_sha3(hash_cls: Type[_SHA3], msg: BytesLike, key: BytesLike) -> bytes:
    """
    Compute HMAC over a SHA-3 family.

    Args:
        hash_cls: SHA3_256 or SHA3_512
        msg: Message bytes
        key: Key bytes of any length

    Returns:
        DIGEST_LENGTH bytes

    Raises:
        HMACAllocationError: the scratch buffer could not be allocated
    """
    msg = check_bytes(msg, "Message")
    key = check_bytes(key, "Key")
    block_length = hash_cls.BLOCK_LENGTH
    digest_length = hash_cls.DIGEST_LENGTH

    try:
        padded_msg = _alloc_scratch(len(msg) + MAX_DIGEST_BLOCK_LEN + 1)
    except MemoryError as exc:
        logger.warning("%s: cannot allocate %d-byte scratch buffer",
                       hash_cls.NAME, len(msg) + MAX_DIGEST_BLOCK_LEN + 1)
        raise HMACAllocationError(f"{hash_cls.NAME}: scratch buffer allocation failed") from exc

    final_key = bytearray(MAX_DIGEST_BLOCK_LEN)
    block_inner_pad = block_outer_pad = None
    padded_hash = bytearray(block_length + digest_length + 1)
    try:
        if len(key) > block_length:
            logger.debug("%s key is %d bytes, longer than the %d-byte rate; hashing it",
                         hash_cls.NAME, len(key), block_length)
            final_key[:digest_length] = hash_cls.raw(key)
            final_len = digest_length
        else:
            final_key[:len(key)] = key
            final_len = len(key)

        block_inner_pad, block_outer_pad = build_pads(final_key, MAX_DIGEST_BLOCK_LEN, final_len)

        # inner: (K' ^ ipad) || message
        inner_length = block_length + len(msg)
        padded_msg[:block_length] = memoryview(block_inner_pad)[:block_length]
        padded_msg[block_length:inner_length] = msg
        inner_hash = hash_cls.raw(memoryview(padded_msg)[:inner_length])

        # outer: (K' ^ opad) || inner hash
        padded_hash[:block_length] = memoryview(block_outer_pad)[:block_length]
        padded_hash[block_length:block_length + digest_length] = inner_hash
        return hash_cls.raw(memoryview(padded_hash)[:block_length + digest_length])
    finally:
        wipe(final_key)
        wipe(block_inner_pad)
        wipe(block_outer_pad)
        wipe(padded_msg)
        wipe(padded_hash)
        del padded_msg


def hmac_sha3_256(msg: BytesLike, key: BytesLike) -> bytes:
    """
    HMAC-SHA3-256 of a whole message.

    Args:
        msg: Message bytes
        key: Key bytes of any length

    Returns:
        32 bytes
    """
    return _hmac_sha3(SHA3_256, msg, key)


def hmac_sha3_512(msg: BytesLike, key: BytesLike) -> bytes:
    """
    HMAC-SHA3-512 of a whole message.

    Args:
        msg: Message bytes
        key: Key bytes of any length

    Returns:
        64 bytes
    """
    return _hmac_sha3(SHA3_512, msg, key)
