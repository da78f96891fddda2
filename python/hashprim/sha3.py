#!/usr/bin/env python3
"""
SHA3-256 / SHA3-512 primitives used by the HMAC engines.

For SHA-3 the HMAC "block length" is the sponge rate: 200 bytes of Keccak
state minus twice the digest length. That gives 136 bytes for SHA3-256 and
72 bytes for SHA3-512.
"""

import hashlib
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

# Largest SHA-3 rate (SHA3-224). Pads in the SHA-3 HMAC path are built to this
# size; bytes past a family's own block length are unused filler.
MAX_DIGEST_BLOCK_LEN = 144


class _SHA3:
    """
    Thin wrapper over hashlib's SHA-3 implementation.

    Subclasses supply the hashlib name and the family sizes.
    """

    NAME = ''
    BLOCK_LENGTH = 0
    DIGEST_LENGTH = 0

    @classmethod
    def new(cls, data: BytesLike = b''):
        """Start a streaming hash. Use .update() and .digest() on the result."""
        return hashlib.new(cls.NAME, data)

    @classmethod
    def raw(cls, data: BytesLike) -> bytes:
        """
        Hash a byte sequence in one call.

        Args:
            data: Byte sequence

        Returns:
            DIGEST_LENGTH bytes
        """
        hasher = hashlib.new(cls.NAME)
        hasher.update(data)
        return hasher.digest()


class SHA3_256(_SHA3):
    """SHA3-256: rate 136 bytes, 32-byte digest."""

    NAME = 'sha3_256'
    BLOCK_LENGTH = 136
    DIGEST_LENGTH = 32


class SHA3_512(_SHA3):
    """SHA3-512: rate 72 bytes, 64-byte digest."""

    NAME = 'sha3_512'
    BLOCK_LENGTH = 72
    DIGEST_LENGTH = 64
