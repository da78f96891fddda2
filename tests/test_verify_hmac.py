"""
tests/test_verify_hmac.py

The known-answer harness must pass on every vector and report mismatches.
"""

from hmacpad import hmac_sha256
from hmacpad.verify_hmac import KNOWN_ANSWERS, verify_all, verify_vector


def test_all_known_answers_pass(capsys):
    assert verify_all()

    out = capsys.readouterr().out
    assert "[FAIL]" not in out
    assert f"{len(KNOWN_ANSWERS)}/{len(KNOWN_ANSWERS)} vectors passed" in out


def test_mismatch_is_reported(capsys):
    wrong = "00" * 32
    assert not verify_vector("wrong", hmac_sha256, b"key", b"msg", wrong)

    out = capsys.readouterr().out
    assert "[FAIL] MISMATCH" in out
    assert "Differences:" in out


def test_every_family_has_known_answers():
    names = " ".join(vector.name for vector in KNOWN_ANSWERS)
    for family in ("HMAC-SHA256", "HMAC-SHA512", "HMAC-SHA3-256", "HMAC-SHA3-512"):
        assert family in names
