"""
Module 02 - Merkle Node
Immutable digest-carrying node of the streaming Merkle tree.

Owner: Protocol/Crypto Engineer
Module ID: M02

Hashing Rules (Hard Contracts):
1. Leaf digest: H(value)
2. Internal digest: H(left.digest || right.digest) over raw digest bytes
3. The digest is computed once at construction and never changes

Ownership:
- An internal node owns its two children (strong references)
- The parent link is a weak back-reference, assigned exactly once
  when the node is merged with a sibling
- A leaf records the tree that accepted it, also exactly once
"""
from __future__ import annotations

import weakref
from typing import Any, Optional

from streamtree.crypto.hashing import HashFunction, hash_concat, sha256, to_hex
from streamtree.schemas.errors import (
    InvalidLeafException,
    InvalidNodeException,
    ParentAlreadyAssignedException,
)


class MerkleNode:
    """
    A node in the streaming Merkle tree.

    Build nodes with :meth:`leaf` or :meth:`combine` rather than calling
    the constructor directly. Nodes compare by identity: two leaves with
    the same value are distinct nodes with equal digests.
    """

    __slots__ = (
        "_digest", "_value", "_left", "_right", "_parent_ref", "_owner_ref", "__weakref__",
    )

    def __init__(
        self,
        digest: bytes,
        value: Optional[bytes] = None,
        left: Optional[MerkleNode] = None,
        right: Optional[MerkleNode] = None,
    ) -> None:
        self._digest = bytes(digest)
        self._value = value
        self._left = left
        self._right = right
        self._parent_ref: Optional[weakref.ReferenceType[MerkleNode]] = None
        self._owner_ref: Optional[weakref.ReferenceType[Any]] = None

    @classmethod
    def leaf(cls, value: bytes, hash_fn: HashFunction = sha256) -> MerkleNode:
        """
        Create a leaf node whose digest is H(value).

        Args:
            value: Leaf payload, any bytes-like object (empty allowed)
            hash_fn: Hash primitive

        Raises:
            InvalidLeafException: If value is not bytes-like
        """
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InvalidLeafException(
                f"Leaf value must be bytes-like, got {type(value).__name__}",
                details={"type": type(value).__name__},
            )
        data = bytes(value)
        return cls(hash_fn(data), value=data)

    @classmethod
    def combine(
        cls,
        left: Optional[MerkleNode],
        right: Optional[MerkleNode],
        hash_fn: HashFunction = sha256,
    ) -> MerkleNode:
        """
        Create an internal node over two existing nodes.

        Parent links of the children are NOT set here; the caller
        assigns them right after creation.

        Raises:
            InvalidNodeException: If either child is missing
        """
        if left is None or right is None:
            raise InvalidNodeException(
                "Internal node requires two children",
                details={"left": left is not None, "right": right is not None},
            )
        return cls(hash_concat(left.digest, right.digest, hash_fn), left=left, right=right)

    @property
    def digest(self) -> bytes:
        return self._digest

    @property
    def left(self) -> Optional[MerkleNode]:
        return self._left

    @property
    def right(self) -> Optional[MerkleNode]:
        return self._right

    @property
    def parent(self) -> Optional[MerkleNode]:
        """The node this one was merged into, or None."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def merged(self) -> bool:
        """True once a parent has been assigned, even if it was since collected."""
        return self._parent_ref is not None

    @property
    def owner(self) -> Optional[Any]:
        """The tree that accepted this leaf, or None."""
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    @property
    def claimed(self) -> bool:
        """True once any tree has accepted this leaf, even if it was since collected."""
        return self._owner_ref is not None

    def claim(self, owner: Any) -> None:
        """
        Record the tree that accepted this leaf. Assigned exactly once.

        Raises:
            InvalidLeafException: If a tree already claimed this node
        """
        if self._owner_ref is not None:
            raise InvalidLeafException(
                "Leaf node already belongs to a tree",
                details={"digest": to_hex(self._digest)},
            )
        self._owner_ref = weakref.ref(owner)

    @property
    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    @property
    def value(self) -> bytes:
        """
        The leaf payload.

        Raises:
            InvalidNodeException: If called on an internal node
        """
        if self._value is None:
            raise InvalidNodeException("Internal nodes carry no leaf value")
        return self._value

    def set_parent(self, parent: MerkleNode) -> None:
        """
        Record the node this one was merged into.

        Raises:
            ParentAlreadyAssignedException: If a parent was already set
            InvalidNodeException: If parent does not own this node
        """
        if self._parent_ref is not None:
            raise ParentAlreadyAssignedException(
                details={"digest": to_hex(self._digest)},
            )
        if parent.left is not self and parent.right is not self:
            raise InvalidNodeException("Parent must own this node as a child")
        self._parent_ref = weakref.ref(parent)

    def sibling(self) -> Optional[MerkleNode]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return sibling_under(self, parent)

    @property
    def hex(self) -> str:
        return to_hex(self._digest)

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "internal"
        return f"MerkleNode({kind}, digest={self.hex[:18]}...)"


def sibling_under(node: MerkleNode, parent: MerkleNode) -> Optional[MerkleNode]:
    """Return the other child of ``parent``, or None if it has no second child."""
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


__all__ = [
    "MerkleNode",
    "sibling_under",
]
