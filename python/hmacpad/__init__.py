"""
HMAC over SHA-256, SHA-512, SHA3-256 and SHA3-512.

This package provides streaming and one-shot HMAC, a prepared-pad
accelerator that returns SHA-2 midstates for repeated-key use, and erasure of
every buffer that held key material.

Main classes and functions:
    HMAC_SHA256, HMAC_SHA512: streaming contexts (init / update / final)
    hmac_sha256, hmac_sha512: one-shot HMAC, hmac(key, msg)
    hmac_sha256_prepare, hmac_sha512_prepare: inner/outer pad midstates
    hmac_sha3_256, hmac_sha3_512: one-shot HMAC, hmac(msg, key)
    build_pads: inner/outer pad derivation

Example usage:
    from hmacpad import HMAC_SHA256, hmac_sha3_512

    h = HMAC_SHA256(b'key')
    h.update(b'The quick brown fox ')
    h.update(b'jumps over the lazy dog')
    tag = h.final()

    tag3 = hmac_sha3_512(b'message', b'key')
"""

from .errors import HMACAllocationError, HMACError, HMACStateError
from .hmac_sha2 import (
    HMAC_SHA256,
    HMAC_SHA512,
    hmac_sha256,
    hmac_sha256_prepare,
    hmac_sha512,
    hmac_sha512_prepare,
)
from .hmac_sha3 import hmac_sha3_256, hmac_sha3_512
from .pads import build_pads

__all__ = [
    'HMAC_SHA256',
    'HMAC_SHA512',
    'hmac_sha256',
    'hmac_sha512',
    'hmac_sha256_prepare',
    'hmac_sha512_prepare',
    'hmac_sha3_256',
    'hmac_sha3_512',
    'build_pads',
    'HMACError',
    'HMACStateError',
    'HMACAllocationError',
]
__version__ = '1.0.0'
