#!/usr/bin/env python3
"""
SHA-256 / SHA-512 primitives used by the HMAC engines.

hashlib covers Init/Update/Final/Raw. It does not expose the FIPS 180-4
compression function, so that part is implemented here: it is what lets a
caller resume hashing from a midstate (the chaining value after some whole
blocks, before length padding).

Blocks are always read as big-endian words, whatever the host byte order.
"""

import hashlib
import struct
from typing import Sequence, Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview]

_K256 = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)

_K512 = (
    0x428a2f98d728ae22, 0x7137449123ef65cd, 0xb5c0fbcfec4d3b2f, 0xe9b5dba58189dbbc,
    0x3956c25bf348b538, 0x59f111f1b605d019, 0x923f82a4af194f9b, 0xab1c5ed5da6d8118,
    0xd807aa98a3030242, 0x12835b0145706fbe, 0x243185be4ee4b28c, 0x550c7dc3d5ffb4e2,
    0x72be5d74f27b896f, 0x80deb1fe3b1696b1, 0x9bdc06a725c71235, 0xc19bf174cf692694,
    0xe49b69c19ef14ad2, 0xefbe4786384f25e3, 0x0fc19dc68b8cd5b5, 0x240ca1cc77ac9c65,
    0x2de92c6f592b0275, 0x4a7484aa6ea6e483, 0x5cb0a9dcbd41fbd4, 0x76f988da831153b5,
    0x983e5152ee66dfab, 0xa831c66d2db43210, 0xb00327c898fb213f, 0xbf597fc7beef0ee4,
    0xc6e00bf33da88fc2, 0xd5a79147930aa725, 0x06ca6351e003826f, 0x142929670a0e6e70,
    0x27b70a8546d22ffc, 0x2e1b21385c26c926, 0x4d2c6dfc5ac42aed, 0x53380d139d95b3df,
    0x650a73548baf63de, 0x766a0abb3c77b2a8, 0x81c2c92e47edaee6, 0x92722c851482353b,
    0xa2bfe8a14cf10364, 0xa81a664bbc423001, 0xc24b8b70d0f89791, 0xc76c51a30654be30,
    0xd192e819d6ef5218, 0xd69906245565a910, 0xf40e35855771202a, 0x106aa07032bbd1b8,
    0x19a4c116b8d2d0c8, 0x1e376c085141ab53, 0x2748774cdf8eeb99, 0x34b0bcb5e19b48a8,
    0x391c0cb3c5c95a63, 0x4ed8aa4ae3418acb, 0x5b9cca4f7763e373, 0x682e6ff3d6b2b8a3,
    0x748f82ee5defb2fc, 0x78a5636f43172f60, 0x84c87814a1f0ab72, 0x8cc702081a6439ec,
    0x90befffa23631e28, 0xa4506cebde82bde9, 0xbef9a3f7b2c67915, 0xc67178f2e372532b,
    0xca273eceea26619c, 0xd186b8c721c0c207, 0xeada7dd6cde0eb1e, 0xf57d4f7fee6ed178,
    0x06f067aa72176fba, 0x0a637dc5a2c898a6, 0x113f9804bef90dae, 0x1b710b35131c471b,
    0x28db77f523047d84, 0x32caab7b40c72493, 0x3c9ebe0a15c9bebc, 0x431d67c49c100d4c,
    0x4cc5d4becb3e42b6, 0x597f299cfc657e2a, 0x5fcb6fab3ad6faec, 0x6c44198c4a475817,
)


class _SHA2:
    """
    FIPS 180-4 machinery shared by SHA-256 and SHA-512.

    Subclasses only supply constants: sizes, round constants, initial hash
    value and the rotation amounts of the four sigma functions.
    """

    NAME = ''
    BLOCK_LENGTH = 0
    DIGEST_LENGTH = 0
    WORD_SIZE = 0
    WORD_BITS = 0
    MASK = 0
    BLOCK_FORMAT = ''
    STATE_FORMAT = ''
    LENGTH_FIELD = 0
    ROUNDS = 0
    K: Tuple[int, ...] = ()
    INITIAL_HASH_VALUE: Tuple[int, ...] = ()

    # (rotr, rotr, rotr) for the big sigmas, (rotr, rotr, shr) for the small ones
    BIG_SIGMA0: Tuple[int, int, int] = (0, 0, 0)
    BIG_SIGMA1: Tuple[int, int, int] = (0, 0, 0)
    SMALL_SIGMA0: Tuple[int, int, int] = (0, 0, 0)
    SMALL_SIGMA1: Tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def new(cls, data: BytesLike = b''):
        """Start a streaming hash (Init). Use .update() and .digest() on the result."""
        return hashlib.new(cls.NAME, data)

    @classmethod
    def raw(cls, data: BytesLike) -> bytes:
        """One-shot hash of data."""
        return hashlib.new(cls.NAME, data).digest()

    @classmethod
    def words(cls, block: BytesLike) -> Tuple[int, ...]:
        """
        Read one block as big-endian words.

        Args:
            block: Exactly BLOCK_LENGTH bytes

        Returns:
            BLOCK_LENGTH // WORD_SIZE words
        """
        if len(block) != cls.BLOCK_LENGTH:
            raise ValueError(f"Block must be {cls.BLOCK_LENGTH} bytes, got {len(block)}")
        return struct.unpack(cls.BLOCK_FORMAT, block)

    @classmethod
    def _rotr(cls, x: int, n: int) -> int:
        return ((x >> n) | (x << (cls.WORD_BITS - n))) & cls.MASK

    @classmethod
    def _big_sigma(cls, x: int, amounts: Tuple[int, int, int]) -> int:
        return cls._rotr(x, amounts[0]) ^ cls._rotr(x, amounts[1]) ^ cls._rotr(x, amounts[2])

    @classmethod
    def _small_sigma(cls, x: int, amounts: Tuple[int, int, int]) -> int:
        return cls._rotr(x, amounts[0]) ^ cls._rotr(x, amounts[1]) ^ (x >> amounts[2])

    @classmethod
    def transform(cls, state: Sequence[int], block: Sequence[int]) -> Tuple[int, ...]:
        """
        Compress one block into a chaining value.

        Args:
            state: 8 chaining-value words (INITIAL_HASH_VALUE or a midstate)
            block: 16 message words in big-endian order (see words())

        Returns:
            The 8 chaining-value words after this block
        """
        if len(state) != 8 or len(block) != 16:
            raise ValueError("transform() needs 8 state words and 16 block words")

        mask = cls.MASK
        w = list(block) + [0] * (cls.ROUNDS - 16)
        for j in range(16, cls.ROUNDS):
            s0 = cls._small_sigma(w[j - 15], cls.SMALL_SIGMA0)
            s1 = cls._small_sigma(w[j - 2], cls.SMALL_SIGMA1)
            w[j] = (s1 + w[j - 7] + s0 + w[j - 16]) & mask

        a, b, c, d, e, f, g, h = state
        for j in range(cls.ROUNDS):
            t1 = h + cls._big_sigma(e, cls.BIG_SIGMA1) + ((e & f) ^ (~e & g)) + cls.K[j] + w[j]
            t2 = cls._big_sigma(a, cls.BIG_SIGMA0) + ((a & b) ^ (a & c) ^ (b & c))
            a, b, c, d, e, f, g, h = (t1 + t2) & mask, a, b, c, (d + t1) & mask, e, f, g

        for j in range(cls.ROUNDS):
            w[j] = 0

        return tuple((x + y) & mask for x, y in zip(state, (a, b, c, d, e, f, g, h)))

    @classmethod
    def finish(cls, state: Sequence[int], data: BytesLike, prefix_length: int = 0) -> bytes:
        """
        Finish a hash that was started elsewhere.

        Compresses data from the given chaining value, appends the FIPS 180-4
        length padding and returns the digest. prefix_length is the number of
        bytes already compressed into state; it counts towards the encoded
        message length.

        Args:
            state: 8 chaining-value words
            data: Remaining message bytes
            prefix_length: Bytes already absorbed into state, a multiple of BLOCK_LENGTH

        Returns:
            DIGEST_LENGTH bytes
        """
        if prefix_length < 0 or prefix_length % cls.BLOCK_LENGTH:
            raise ValueError(f"prefix_length must be a multiple of {cls.BLOCK_LENGTH}, got {prefix_length}")

        data = bytes(data)
        zeros = (cls.BLOCK_LENGTH - (len(data) + 1 + cls.LENGTH_FIELD) % cls.BLOCK_LENGTH) % cls.BLOCK_LENGTH
        bit_length = (prefix_length + len(data)) * 8
        message = data + b'\x80' + b'\x00' * zeros + bit_length.to_bytes(cls.LENGTH_FIELD, byteorder='big')

        for i in range(0, len(message), cls.BLOCK_LENGTH):
            state = cls.transform(state, cls.words(message[i:i + cls.BLOCK_LENGTH]))

        return struct.pack(cls.STATE_FORMAT, *state)


class SHA256(_SHA2):
    """SHA-256: 64-byte blocks, 32-byte digest, 32-bit words."""

    NAME = 'sha256'
    BLOCK_LENGTH = 64
    DIGEST_LENGTH = 32
    WORD_SIZE = 4
    WORD_BITS = 32
    MASK = 0xFFFFFFFF
    BLOCK_FORMAT = '>16I'
    STATE_FORMAT = '>8I'
    LENGTH_FIELD = 8
    ROUNDS = 64
    K = _K256
    INITIAL_HASH_VALUE = (
        0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
        0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
    )

    BIG_SIGMA0 = (2, 13, 22)
    BIG_SIGMA1 = (6, 11, 25)
    SMALL_SIGMA0 = (7, 18, 3)
    SMALL_SIGMA1 = (17, 19, 10)


class SHA512(_SHA2):
    """SHA-512: 128-byte blocks, 64-byte digest, 64-bit words."""

    NAME = 'sha512'
    BLOCK_LENGTH = 128
    DIGEST_LENGTH = 64
    WORD_SIZE = 8
    WORD_BITS = 64
    MASK = 0xFFFFFFFFFFFFFFFF
    BLOCK_FORMAT = '>16Q'
    STATE_FORMAT = '>8Q'
    LENGTH_FIELD = 16
    ROUNDS = 80
    K = _K512
    INITIAL_HASH_VALUE = (
        0x6a09e667f3bcc908, 0xbb67ae8584caa73b, 0x3c6ef372fe94f82b, 0xa54ff53a5f1d36f1,
        0x510e527fade682d1, 0x9b05688c2b3e6c1f, 0x1f83d9abfb41bd6b, 0x5be0cd19137e2179,
    )

    BIG_SIGMA0 = (28, 34, 39)
    BIG_SIGMA1 = (14, 18, 41)
    SMALL_SIGMA0 = (1, 8, 7)
    SMALL_SIGMA1 = (19, 61, 6)
