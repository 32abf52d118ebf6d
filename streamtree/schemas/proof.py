"""
Module 00 - Schemas
File: proof.py

Purpose: Export views of inclusion proofs and frontier state.

These models are read-only snapshots for JSON output (CLI, logs,
diagnostics). They are not a storage format: a tree is never rebuilt
from them.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .versioning import SCHEMA_VERSION, assert_supported_schema_version

_HEX_DIGEST = re.compile(r"^0x(?:[0-9a-f]{2})+$")


def _check_hex(value: str) -> str:
    if not _HEX_DIGEST.match(value):
        raise ValueError(f"Digest must be lowercase 0x-prefixed hex, got: {value[:16]}...")
    return value


class InclusionProof(BaseModel):
    """
    Inclusion proof for a single leaf, ordered leaf-to-root.

    ``siblings`` holds the sibling digests encountered on the walk
    from the leaf to the root; ``root`` is the final element of the
    raw proof sequence returned by the tree.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: str = Field(default=SCHEMA_VERSION)
    hash_algorithm: str = Field(..., min_length=1)
    leaf_index: int = Field(..., ge=0)
    tree_size: int = Field(..., ge=1)
    leaf_digest: str = Field(..., description="Digest of the proven leaf")
    siblings: list[str] = Field(default_factory=list, description="Sibling digests, bottom-up")
    root: str = Field(..., description="Root digest the proof was generated against")

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, v: str) -> str:
        assert_supported_schema_version(v)
        return v

    @field_validator("leaf_digest", "root")
    @classmethod
    def _validate_digest(cls, v: str) -> str:
        return _check_hex(v)

    @field_validator("siblings")
    @classmethod
    def _validate_siblings(cls, v: list[str]) -> list[str]:
        for digest in v:
            _check_hex(digest)
        return v

    @property
    def depth(self) -> int:
        """Number of merge levels between the leaf and the root."""
        return len(self.siblings)

    def digests(self) -> list[bytes]:
        """Return the raw proof sequence: siblings followed by the root."""
        return [bytes.fromhex(d[2:]) for d in self.siblings] + [bytes.fromhex(self.root[2:])]


class FrontierSummary(BaseModel):
    """Diagnostic snapshot of a tree's frontier and root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: str = Field(default=SCHEMA_VERSION)
    hash_algorithm: str = Field(..., min_length=1)
    tree_size: int = Field(..., ge=0)
    size_classes: list[int] = Field(default_factory=list)
    root: str | None = Field(default=None)

    @field_validator("size_classes")
    @classmethod
    def _validate_size_classes(cls, v: list[int]) -> list[int]:
        for size in v:
            if size < 1 or size & (size - 1):
                raise ValueError(f"Size class must be a power of two, got {size}")
        return v

    @field_validator("root")
    @classmethod
    def _validate_root(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_hex(v)
