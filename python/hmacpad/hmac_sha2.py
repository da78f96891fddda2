#!/usr/bin/env python3
"""
HMAC-SHA256 / HMAC-SHA512 (RFC 2104).

    HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m))

Three ways in:
- HMAC_SHA256 / HMAC_SHA512: streaming context (init, update..., final)
- hmac_sha256 / hmac_sha512: whole message in one call
- hmac_sha256_prepare / hmac_sha512_prepare: midstates of the padded key
  blocks, for callers that run their own compression loop over many messages
  under the same key

A context never holds the raw key, only the outer pad and the running inner
hash. Every buffer that held key material is zeroed before the call that
created it returns, including when it raises.
"""

import logging
from typing import Optional, Tuple, Type

from hashprim.sha2 import SHA256, SHA512, _SHA2

from .errors import HMACStateError
from .pads import IPAD_BYTE, OPAD_BYTE, BytesLike, check_bytes, wipe, wipe_words

logger = logging.getLogger(__name__)

Midstate = Tuple[int, ...]


class _HMAC_SHA2:
    """
    Streaming HMAC over a SHA-2 family.

    States:
        uninitialized -> init() -> ready -> update()* -> final() -> uninitialized

    update() and final() on an uninitialized context raise HMACStateError.
    After final(), o_key_pad is all zero and ctx is None; call init() again
    to reuse the object.
    """

    HASH: Type[_SHA2] = _SHA2

    def __init__(self, key: Optional[BytesLike] = None):
        """
        Create a context, initialized right away when a key is given.

        Args:
            key: Optional key bytes of any length
        """
        self.o_key_pad = bytearray(self.HASH.BLOCK_LENGTH)
        self.ctx = None
        if key is not None:
            self.init(key)

    @property
    def digest_size(self) -> int:
        return self.HASH.DIGEST_LENGTH

    @property
    def block_size(self) -> int:
        return self.HASH.BLOCK_LENGTH

    def init(self, key: BytesLike) -> '_HMAC_SHA2':
        """
        Derive the pads from key and absorb the inner pad.

        Keys longer than the block are replaced by their digest first.

        Args:
            key: Key bytes of any length

        Returns:
            self
        """
        key = check_bytes(key, "Key")
        block_length = self.HASH.BLOCK_LENGTH

        i_key_pad = bytearray(block_length)
        try:
            if len(key) > block_length:
                logger.debug("%s key is %d bytes, longer than the %d-byte block; hashing it",
                             self.HASH.NAME, len(key), block_length)
                i_key_pad[:self.HASH.DIGEST_LENGTH] = self.HASH.raw(key)
            else:
                i_key_pad[:len(key)] = key

            for i in range(block_length):
                self.o_key_pad[i] = i_key_pad[i] ^ OPAD_BYTE
                i_key_pad[i] ^= IPAD_BYTE

            ctx = self.HASH.new()
            ctx.update(i_key_pad)
            self.ctx = ctx
        finally:
            wipe(i_key_pad)

        return self

    def update(self, msg: BytesLike) -> '_HMAC_SHA2':
        """Feed the next chunk of the message. Returns self."""
        if self.ctx is None:
            raise HMACStateError("update() called on an uninitialized context")
        msg = check_bytes(msg, "Message")
        self.ctx.update(msg)
        return self

    def final(self) -> bytes:
        """
        Finish the MAC and erase the context.

        Returns:
            DIGEST_LENGTH bytes
        """
        if self.ctx is None:
            raise HMACStateError("final() called on an uninitialized context")
        try:
            inner_hash = self.ctx.digest()
            outer = self.HASH.new()
            outer.update(self.o_key_pad)
            outer.update(inner_hash)
            return outer.digest()
        finally:
            self.erase()

    def final_hex(self) -> str:
        """final() as a hex string."""
        return self.final().hex()

    def erase(self) -> None:
        """Zero the outer pad and drop the running hash."""
        wipe(self.o_key_pad)
        self.ctx = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.erase()
        return False


class HMAC_SHA256(_HMAC_SHA2):
    """Streaming HMAC-SHA256 context."""

    HASH = SHA256


class HMAC_SHA512(_HMAC_SHA2):
    """Streaming HMAC-SHA512 context."""

    HASH = SHA512


def hmac_sha256(key: BytesLike, msg: BytesLike) -> bytes:
    """
    HMAC-SHA256 of a whole message.

    Args:
        key: Key bytes of any length
        msg: Message bytes

    Returns:
        32 bytes
    """
    return HMAC_SHA256(key).update(msg).final()


def hmac_sha512(key: BytesLike, msg: BytesLike) -> bytes:
    """
    HMAC-SHA512 of a whole message.

    Args:
        key: Key bytes of any length
        msg: Message bytes

    Returns:
        64 bytes
    """
    return HMAC_SHA512(key).update(msg).final()


def _repeat_byte(value: int, size: int) -> int:
    return int.from_bytes(bytes([value]) * size, byteorder='big')


def _prepare(hash_cls: Type[_SHA2], key: BytesLike) -> Tuple[Midstate, Midstate]:
    key = check_bytes(key, "Key")
    block_length = hash_cls.BLOCK_LENGTH
    opad_word = _repeat_byte(OPAD_BYTE, hash_cls.WORD_SIZE)
    ipad_word = _repeat_byte(IPAD_BYTE, hash_cls.WORD_SIZE)

    key_pad = bytearray(block_length)
    words = None
    try:
        if len(key) > block_length:
            logger.debug("%s key is %d bytes, longer than the %d-byte block; hashing it",
                         hash_cls.NAME, len(key), block_length)
            key_pad[:hash_cls.DIGEST_LENGTH] = hash_cls.raw(key)
        else:
            key_pad[:len(key)] = key

        words = list(hash_cls.words(key_pad))

        for i in range(len(words)):
            words[i] ^= opad_word
        opad_digest = hash_cls.transform(hash_cls.INITIAL_HASH_VALUE, words)

        # opad words -> ipad words without touching the key again
        for i in range(len(words)):
            words[i] ^= opad_word ^ ipad_word
        ipad_digest = hash_cls.transform(hash_cls.INITIAL_HASH_VALUE, words)

        logger.debug("%s midstates prepared", hash_cls.NAME)
        return opad_digest, ipad_digest
    finally:
        wipe(key_pad)
        wipe_words(words)


def hmac_sha256_prepare(key: BytesLike) -> Tuple[Midstate, Midstate]:
    """
    Midstates of the outer and inner padded key blocks for HMAC-SHA256.

    Each midstate is the SHA-256 chaining value after compressing one
    64-byte pad block from the initial hash value. They are not digests.
    To finish a MAC:

        inner = SHA256.finish(ipad_digest, msg, SHA256.BLOCK_LENGTH)
        tag = SHA256.finish(opad_digest, inner, SHA256.BLOCK_LENGTH)

    Args:
        key: Key bytes of any length

    Returns:
        (opad_digest, ipad_digest), each 8 words of 32 bits
    """
    return _prepare(SHA256, key)


def hmac_sha512_prepare(key: BytesLike) -> Tuple[Midstate, Midstate]:
    """
    Midstates of the outer and inner padded key blocks for HMAC-SHA512.

    Same as hmac_sha256_prepare with 128-byte blocks and 64-bit words.

    Returns:
        (opad_digest, ipad_digest), each 8 words of 64 bits
    """
    return _prepare(SHA512, key)
