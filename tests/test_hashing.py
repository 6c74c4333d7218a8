"""
Unit tests for hashing primitives.
"""

import hashlib
import hmac

from signed_rest import hmac_sha256, sha256_hash, to_hex


class TestHashing:
    """Test hashing primitives against known vectors."""

    def test_to_hex(self):
        """Test lower-case two-digit hex encoding."""
        assert to_hex(b"\x00\x0f\xab\xff") == "000fabff"
        assert to_hex(b"") == ""

    def test_sha256_hash_known_vectors(self):
        """Test SHA-256 against published digests."""
        assert sha256_hash(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert sha256_hash(b"abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_sha256_hash_str_is_utf8(self):
        """Test that strings are hashed as UTF-8 bytes."""
        assert sha256_hash("olá") == hashlib.sha256("olá".encode('utf-8')).hexdigest()

    def test_hmac_sha256_known_vector(self):
        """Test HMAC-SHA256 against RFC 4231 test case 2."""
        signature = hmac_sha256("what do ya want for nothing?", "Jefe")
        assert signature == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"

    def test_hmac_sha256_matches_stdlib(self):
        """Test HMAC-SHA256 with bytes input."""
        expected = hmac.new(b"key", b"data", hashlib.sha256).hexdigest()
        assert hmac_sha256(b"data", b"key") == expected
        assert len(expected) == 64
