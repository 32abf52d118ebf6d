"""
Core cryptographic utilities.

Module 01 provides the hash primitive used by every tree node.
"""
from .hashing import (
    DEFAULT_HASH_ALGORITHM,
    HashFunction,
    sha256,
    hash_bytes,
    get_hash_function,
    digest_size,
    hash_concat,
    to_hex,
    from_hex,
)

__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "HashFunction",
    "sha256",
    "hash_bytes",
    "get_hash_function",
    "digest_size",
    "hash_concat",
    "to_hex",
    "from_hex",
]
