"""
Hash primitives consumed by the hmacpad HMAC engines.

This package wraps hashlib for the streaming and one-shot hash operations and
adds the SHA-2 compression function, which the prepared-pad accelerator needs
to produce and resume midstates.

Main classes:
    SHA256, SHA512: SHA-2 families (new, raw, words, transform, finish)
    SHA3_256, SHA3_512: SHA-3 families (new, raw)

Example usage:
    from hashprim import SHA256

    state = SHA256.transform(SHA256.INITIAL_HASH_VALUE, SHA256.words(block))
    digest = SHA256.finish(state, b'rest of message', SHA256.BLOCK_LENGTH)
"""

from .sha2 import SHA256, SHA512
from .sha3 import MAX_DIGEST_BLOCK_LEN, SHA3_256, SHA3_512

__all__ = ['SHA256', 'SHA512', 'SHA3_256', 'SHA3_512', 'MAX_DIGEST_BLOCK_LEN']
__version__ = '1.0.0'
