"""
Module 01 - Hashing Unit Tests
Tests for streamtree/crypto/hashing.py

Tests:
- sha256 stability
- hash primitive selection by name
- hash_concat matches the internal node rule
- to_hex/from_hex round trip
"""
import hashlib

import pytest

from streamtree.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    digest_size,
    from_hex,
    get_hash_function,
    hash_bytes,
    hash_concat,
    sha256,
    to_hex,
)
from streamtree.schemas.errors import ErrorCodes, UnsupportedHashAlgorithmException


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        assert sha256(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_sha256_empty_bytes(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()

    def test_hash_bytes_equals_sha256(self):
        assert hash_bytes(b"test data") == sha256(b"test data")


class TestGetHashFunction:
    """Tests for get_hash_function()."""

    def test_default_is_sha256(self):
        assert DEFAULT_HASH_ALGORITHM == "sha256"
        assert get_hash_function() is sha256

    @pytest.mark.parametrize("name", ["sha3_256", "SHA3-256", " sha3_256 "])
    def test_name_normalization(self, name):
        fn = get_hash_function(name)
        assert fn(b"x") == hashlib.sha3_256(b"x").digest()

    def test_blake2b(self):
        assert get_hash_function("blake2b")(b"x") == hashlib.blake2b(b"x").digest()

    @pytest.mark.parametrize("name", ["shake_128", "shake_256"])
    def test_variable_length_rejected(self, name):
        with pytest.raises(UnsupportedHashAlgorithmException):
            get_hash_function(name)

    def test_unknown_rejected(self):
        with pytest.raises(UnsupportedHashAlgorithmException) as exc_info:
            get_hash_function("sha-9000")

        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_HASH_ALGORITHM
        assert exc_info.value.details == {"algorithm": "sha-9000"}

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            get_hash_function("nope")


class TestDigestSize:
    """Tests for digest_size()."""

    @pytest.mark.parametrize(
        "name,size",
        [("sha256", 32), ("sha512", 64), ("sha3_256", 32), ("blake2s", 32)],
    )
    def test_sizes(self, name, size):
        assert digest_size(name) == size


class TestHashConcat:
    """Tests for hash_concat()."""

    def test_equals_sha256_of_concat(self):
        left, right = sha256(b"left"), sha256(b"right")
        assert hash_concat(left, right) == sha256(left + right)

    def test_order_matters(self):
        a, b = sha256(b"a"), sha256(b"b")
        assert hash_concat(a, b) != hash_concat(b, a)

    def test_custom_primitive(self):
        sha3 = get_hash_function("sha3_256")
        assert hash_concat(b"l", b"r", sha3) == hashlib.sha3_256(b"lr").digest()


class TestHexConversion:
    """Tests for to_hex / from_hex."""

    def test_to_hex_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"

    def test_round_trip(self):
        digest = sha256(b"round trip")
        assert from_hex(to_hex(digest)) == digest

    def test_from_hex_requires_prefix(self):
        with pytest.raises(ValueError, match="0x"):
            from_hex("deadbeef")

    def test_from_hex_odd_length(self):
        with pytest.raises(ValueError, match="even length"):
            from_hex("0xabc")

    def test_from_hex_invalid_chars(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            from_hex("0xzz")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
