#!/usr/bin/env python3
"""
Known-answer verification for the HMAC engines.

Runs the published test vectors (RFC 4231 for HMAC-SHA256/512, the
"quick brown fox" vector, and HMAC-SHA3-256/512 vectors) through the one-shot
functions and prints a comparison for each.

Usage:
    python -m hmacpad.verify_hmac
"""

import sys
from typing import Callable, List, NamedTuple

from .hmac_sha2 import hmac_sha256, hmac_sha512
from .hmac_sha3 import hmac_sha3_256, hmac_sha3_512


class KnownAnswer(NamedTuple):
    name: str
    compute: Callable[[bytes, bytes], bytes]
    key: bytes
    message: bytes
    expected_hex: str


def _sha3_256(key: bytes, message: bytes) -> bytes:
    return hmac_sha3_256(message, key)


def _sha3_512(key: bytes, message: bytes) -> bytes:
    return hmac_sha3_512(message, key)


_FOX = b"The quick brown fox jumps over the lazy dog"
_RFC4231_LONG_KEY_MSG = b"Test Using Larger Than Block-Size Key - Hash Key First"

KNOWN_ANSWERS: List[KnownAnswer] = [
    KnownAnswer("RFC 4231 case 1, HMAC-SHA256", hmac_sha256,
                b"\x0b" * 20, b"Hi There",
                "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7"),
    KnownAnswer("RFC 4231 case 2, HMAC-SHA256", hmac_sha256,
                b"Jefe", b"what do ya want for nothing?",
                "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"),
    KnownAnswer("RFC 4231 case 6, HMAC-SHA256", hmac_sha256,
                b"\xaa" * 131, _RFC4231_LONG_KEY_MSG,
                "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54"),
    KnownAnswer("RFC 4231 case 1, HMAC-SHA512", hmac_sha512,
                b"\x0b" * 20, b"Hi There",
                "87aa7cdea5ef619d4ff0b4241a1d6cb02379f4e2ce4ec2787ad0b30545e17cde"
                "daa833b7d6b8a702038b274eaea3f4e4be9d914eeb61f1702e696c203a126854"),
    KnownAnswer("RFC 4231 case 2, HMAC-SHA512", hmac_sha512,
                b"Jefe", b"what do ya want for nothing?",
                "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
                "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"),
    KnownAnswer("RFC 4231 case 6, HMAC-SHA512", hmac_sha512,
                b"\xaa" * 131, _RFC4231_LONG_KEY_MSG,
                "80b24263c7c1a3ebb71493c1dd7be8b49b46d1f41b4aeec1121b013783f8f352"
                "6b56d037e05f2598bd0fd2215d6a1e5295e64f73f63f0aec8b915a985d786598"),
    KnownAnswer("Quick brown fox, HMAC-SHA256", hmac_sha256,
                b"key", _FOX,
                "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"),
    KnownAnswer("Case 1, HMAC-SHA3-256", _sha3_256,
                b"\x0b" * 20, b"Hi There",
                "ba85192310dffa96e2a3a40e69774351140bb7185e1202cdcc917589f95e16bb"),
    KnownAnswer("Case 2, HMAC-SHA3-256", _sha3_256,
                b"Jefe", b"what do ya want for nothing?",
                "c7d4072e788877ae3596bbb0da73b887c9171f93095b294ae857fbe2645e1ba5"),
    KnownAnswer("Case 3, HMAC-SHA3-256", _sha3_256,
                b"\xaa" * 20, b"\xdd" * 50,
                "84ec79124a27107865cedd8bd82da9965e5ed8c37b0ac98005a7f39ed58a4207"),
    KnownAnswer("Case 6, HMAC-SHA3-256", _sha3_256,
                b"\xaa" * 131, _RFC4231_LONG_KEY_MSG,
                "ed73a374b96c005235f948032f09674a58c0ce555cfc1f223b02356560312c3b"),
    KnownAnswer("Case 1, HMAC-SHA3-512", _sha3_512,
                b"\x0b" * 20, b"Hi There",
                "eb3fbd4b2eaab8f5c504bd3a41465aacec15770a7cabac531e482f860b5ec7ba"
                "47ccb2c6f2afce8f88d22b6dc61380f23a668fd3888bb80537c0a0b86407689e"),
    KnownAnswer("Case 2, HMAC-SHA3-512", _sha3_512,
                b"Jefe", b"what do ya want for nothing?",
                "5a4bfeab6166427c7a3647b747292b8384537cdb89afb3bf5665e4c5e709350b"
                "287baec921fd7ca0ee7a0c31d022a95e1fc92ba9d77df883960275beb4e62024"),
]


def verify_vector(name: str, compute: Callable[[bytes, bytes], bytes],
                  key: bytes, message: bytes, expected_hex: str) -> bool:
    """
    Compute one MAC and compare it with the published value.

    Args:
        name: Label printed in the banner
        compute: Function taking (key, message) and returning the tag
        key: Key bytes
        message: Message bytes
        expected_hex: Published tag as hex

    Returns:
        bool: True if match, False otherwise
    """
    expected = bytes.fromhex(expected_hex)
    computed = compute(key, message)

    print("=" * 70)
    print(name)
    print("=" * 70)

    print(f"\nKey ({len(key)} bytes):")
    print(f"  {key.hex()}")
    print(f"\nMessage ({len(message)} bytes):")
    print(f"  {message.hex()}")

    print(f"\nExpected:")
    print(f"  {expected.hex()}")
    print(f"\nComputed:")
    print(f"  {computed.hex()}")

    match = (computed == expected)

    print(f"\n{'=' * 70}")
    if match:
        print("[PASS] MATCH")
    else:
        print("[FAIL] MISMATCH: Outputs differ!")
        print("\nDifferences:")
        for i in range(max(len(expected), len(computed))):
            exp_byte = expected[i] if i < len(expected) else None
            comp_byte = computed[i] if i < len(computed) else None
            if exp_byte != comp_byte:
                print(f"  Byte {i:2d}: Expected {exp_byte}, Got {comp_byte}")
    print("=" * 70)
    return match


def verify_all() -> bool:
    """Run every known-answer vector. True only if all of them match."""
    results = [verify_vector(*vector) for vector in KNOWN_ANSWERS]
    passed = sum(results)
    print(f"\n{passed}/{len(results)} vectors passed")
    return passed == len(results)


if __name__ == "__main__":
    sys.exit(0 if verify_all() else 1)
