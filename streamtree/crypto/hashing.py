"""
Module 01 - Hashing Utilities
Hash primitive selection and digest helpers for the streaming Merkle tree.

Owner: Protocol/Crypto Engineer
Module ID: M01

This module provides:
- SHA-256 hashing for raw bytes (the default tree primitive)
- Selection of any fixed-length hashlib algorithm by name
- Concatenation hashing used for internal Merkle nodes
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Always hash raw bytes exactly as given, never hex text
- Leaves and internal nodes share one primitive with no domain prefix
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from typing import Callable

from streamtree.schemas.errors import UnsupportedHashAlgorithmException


HashFunction = Callable[[bytes], bytes]

DEFAULT_HASH_ALGORITHM: str = "sha256"


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_bytes(data: bytes) -> bytes:
    """Alias for sha256()."""
    return sha256(data)


def _normalize_algorithm(algorithm: str) -> str:
    return algorithm.strip().lower().replace("-", "_")


def get_hash_function(algorithm: str = DEFAULT_HASH_ALGORITHM) -> HashFunction:
    """
    Resolve a hashlib algorithm name to a ``bytes -> digest`` function.

    Names are case-insensitive and accept dashes ("SHA3-256").
    Extendable-output functions (shake_128, shake_256) are rejected
    because tree digests must have a fixed length.

    Args:
        algorithm: hashlib algorithm name

    Returns:
        Function computing the raw digest of a byte sequence

    Raises:
        UnsupportedHashAlgorithmException: If the name is unknown or
            the algorithm has no fixed digest length
    """
    name = _normalize_algorithm(algorithm)
    if name == DEFAULT_HASH_ALGORITHM:
        return sha256

    if name not in hashlib.algorithms_available or name.startswith("shake_"):
        raise UnsupportedHashAlgorithmException(algorithm)

    try:
        hashlib.new(name)
    except ValueError as e:
        raise UnsupportedHashAlgorithmException(algorithm) from e

    def _digest(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    _digest.__name__ = name
    return _digest


def digest_size(algorithm: str = DEFAULT_HASH_ALGORITHM) -> int:
    """Return the digest length in bytes for the given algorithm."""
    return len(get_hash_function(algorithm)(b""))


def hash_concat(left: bytes, right: bytes, hash_fn: HashFunction = sha256) -> bytes:
    """
    Hash the concatenation of two digests.

    This is the internal node rule: parent = H(left || right),
    computed over the raw digest bytes.

    Args:
        left: Left child digest
        right: Right child digest
        hash_fn: Hash primitive (defaults to SHA-256)

    Returns:
        Digest of the concatenation
    """
    return hash_fn(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "HashFunction",
    "DEFAULT_HASH_ALGORITHM",
    "sha256",
    "hash_bytes",
    "get_hash_function",
    "digest_size",
    "hash_concat",
    "to_hex",
    "from_hex",
]
