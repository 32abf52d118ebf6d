"""
Module 02 - Streaming Merkle Tree
Append-only Merkle tree built incrementally from a frontier of
complete subtrees.

Owner: Protocol/Crypto Engineer
Module ID: M02

Construction Rules (Hard Contracts):
1. Frontier keys are size-classes (powers of two); at most one
   complete subtree per size-class.
2. Insertion merges like a binary counter increment: the new carry is
   the LEFT child, the existing frontier entry is the RIGHT child.
3. Root recomputation pairs frontier entries in ascending size-class
   order (left = smaller class). An odd leftover is promoted unchanged
   to the next level; no sentinel digest is ever hashed.
4. With a single frontier entry, that entry is the root.
5. Proofs list sibling digests from leaf to root and end with the
   root digest. A level without a sibling is skipped.

Notes:
- Pairing smallest-first differs from a Merkle mountain range, which
  bags peaks from the largest down. Roots are therefore NOT
  interchangeable with MMR or RFC 6962 roots over the same leaves.
- Peak-to-bagging-node links are transient and kept in the tree;
  a peak's own parent field is reserved for its permanent merge.
- A leaf node belongs to the first tree that accepts it.
- Not safe for concurrent mutation; callers serialize insert and
  proof generation.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from streamtree.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    digest_size,
    get_hash_function,
    to_hex,
)
from streamtree.merkle.merkle_node import MerkleNode, sibling_under
from streamtree.schemas.errors import (
    EmptyTreeException,
    InvalidLeafException,
    InvalidNodeException,
    NodeNotFoundException,
)

if TYPE_CHECKING:
    from streamtree.config.runtime import TreeConfig


logger = logging.getLogger(__name__)


class StreamingMerkleTree:
    """
    Incremental Merkle tree over an append-only sequence of byte values.

    Example:
        >>> tree = StreamingMerkleTree()
        >>> for value in [b"a", b"b", b"c"]:
        ...     tree.insert(value)
        >>> tree.size_classes()
        [1, 2]
        >>> proof = tree.generate_proof(tree.get_leaf(0))
        >>> proof[-1] == tree.current_root_digest()
        True
    """

    def __init__(self, hash_algorithm: str = DEFAULT_HASH_ALGORITHM) -> None:
        self._hash = get_hash_function(hash_algorithm)
        self._hash_algorithm = hash_algorithm
        self._digest_size = digest_size(hash_algorithm)
        self._frontier: dict[int, MerkleNode] = {}
        self._root: Optional[MerkleNode] = None
        self._leaves: list[MerkleNode] = []
        self._leaf_index: dict[MerkleNode, int] = {}
        # frontier peak -> node built over it by the latest root recomputation
        self._peak_parents: dict[MerkleNode, MerkleNode] = {}

    @classmethod
    def from_values(
        cls,
        values: Iterable[bytes],
        hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
    ) -> StreamingMerkleTree:
        """Build a tree by inserting ``values`` in order."""
        tree = cls(hash_algorithm=hash_algorithm)
        for value in values:
            tree.insert(value)
        return tree

    @classmethod
    def from_config(cls, config: TreeConfig) -> StreamingMerkleTree:
        """Build an empty tree from a TreeConfig."""
        return cls(hash_algorithm=config.hash_algorithm)

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def hash_algorithm(self) -> str:
        return self._hash_algorithm

    @property
    def root(self) -> Optional[MerkleNode]:
        return self._root

    @property
    def frontier(self) -> dict[int, MerkleNode]:
        """Copy of the size-class -> subtree root mapping, ascending."""
        return {k: self._frontier[k] for k in sorted(self._frontier)}

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    def __len__(self) -> int:
        return len(self._leaves)

    @property
    def leaves(self) -> Iterator[MerkleNode]:
        return iter(self._leaves)

    def size_classes(self) -> list[int]:
        """Occupied size-classes in ascending order."""
        return sorted(self._frontier)

    def current_root_digest(self) -> Optional[bytes]:
        """Digest of the whole sequence so far, or None for an empty tree."""
        if self._root is None:
            return None
        return self._root.digest

    def get_leaf(self, index: int) -> MerkleNode:
        """
        Return the leaf node inserted at ``index`` (0-based).

        Raises:
            IndexError: If index is out of range
        """
        if index < 0 or index >= len(self._leaves):
            raise IndexError(
                f"Leaf index {index} out of range for {len(self._leaves)} leaves"
            )
        return self._leaves[index]

    def index_of(self, node: MerkleNode) -> int:
        """
        Return the insertion index of a leaf node.

        Raises:
            NodeNotFoundException: If the node is not a leaf of this tree
        """
        index = self._leaf_index.get(node)
        if index is None:
            raise NodeNotFoundException(
                "Node is not a leaf of this tree", digest=node.hex,
            )
        return index

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def insert(self, value: bytes) -> None:
        """
        Append a leaf value to the tree.

        Any bytes-like value is valid, including the empty sequence.

        Raises:
            InvalidLeafException: If value is not bytes-like
        """
        self.append_node(MerkleNode.leaf(value, self._hash))

    def append_node(self, node: MerkleNode) -> None:
        """
        Append a caller-constructed leaf node.

        The node handle can later be passed to :meth:`generate_proof`.
        A rejected node leaves the tree unchanged.

        Raises:
            InvalidLeafException: If node is internal, already inserted,
                accepted by another tree, already merged, or hashed with
                a different digest size
            InvalidNodeException: If a frontier peak was merged by another
                caller
        """
        if not node.is_leaf:
            raise InvalidLeafException("Only leaf nodes can be appended")
        if node in self._leaf_index:
            raise InvalidLeafException(
                "Leaf node already inserted", details={"digest": node.hex},
            )
        if node.claimed or node.merged:
            raise InvalidLeafException(
                "Leaf node already belongs to another tree", details={"digest": node.hex},
            )
        if len(node.digest) != self._digest_size:
            raise InvalidLeafException(
                f"Leaf digest is {len(node.digest)} bytes, "
                f"expected {self._digest_size} for {self._hash_algorithm}",
            )

        # peaks this insertion will merge; checked before anything changes
        size = 1
        while size in self._frontier:
            if self._frontier[size].merged:
                raise InvalidNodeException(
                    f"Frontier peak of size-class {size} was merged outside this tree",
                    details={"digest": self._frontier[size].hex},
                )
            size *= 2

        node.claim(self)
        carry = node
        size = 1
        while size in self._frontier:
            carry = self._merge(carry, self._frontier[size])
            del self._frontier[size]
            logger.debug(f"merged size-class {size} into {size * 2}: {carry.hex}")
            size *= 2
        self._frontier[size] = carry

        self._leaf_index[node] = len(self._leaves)
        self._leaves.append(node)
        self.recompute_root()

    def _merge(self, left: MerkleNode, right: MerkleNode) -> MerkleNode:
        merged = MerkleNode.combine(left, right, self._hash)
        left.set_parent(merged)
        right.set_parent(merged)
        return merged

    # -------------------------------------------------------------------------
    # Root recomputation
    # -------------------------------------------------------------------------

    def recompute_root(self) -> None:
        """
        Rebuild the root from the current frontier.

        Idempotent: repeated calls without insertion yield the same
        root digest.
        """
        if not self._frontier:
            self._root = None
            self._peak_parents = {}
            return

        peaks = set(self._frontier.values())
        peak_parents: dict[MerkleNode, MerkleNode] = {}

        level = [self._frontier[size] for size in sorted(self._frontier)]
        while len(level) > 1:
            next_level: list[MerkleNode] = []
            for i in range(0, len(level) - 1, 2):
                left, right = level[i], level[i + 1]
                parent = MerkleNode.combine(left, right, self._hash)
                for child in (left, right):
                    if child in peaks:
                        peak_parents[child] = parent
                    else:
                        child.set_parent(parent)
                next_level.append(parent)
            if len(level) % 2 == 1:
                # lone leftover moves up unchanged
                next_level.append(level[-1])
            level = next_level

        self._peak_parents = peak_parents
        self._root = level[0]
        logger.debug(
            f"root updated: {to_hex(self._root.digest)} "
            f"(leaves={len(self._leaves)}, size_classes={self.size_classes()})"
        )

    # -------------------------------------------------------------------------
    # Proof generation
    # -------------------------------------------------------------------------

    def parent_of(self, node: MerkleNode) -> Optional[MerkleNode]:
        """
        Resolve the node above ``node`` in the current tree.

        Frontier peaks have no permanent parent; for them this returns the
        node built over them by the latest root recomputation.
        """
        parent = node.parent
        if parent is not None:
            return parent
        return self._peak_parents.get(node)

    def iter_proof(self, node: MerkleNode) -> Iterator[bytes]:
        """
        Lazily yield the proof digests for ``node``, leaf to root.

        Prefer :meth:`generate_proof`, which checks connectivity before
        returning anything. This generator raises mid-iteration if the
        walk falls off the tree.

        Raises:
            EmptyTreeException: If the tree has no leaves
            NodeNotFoundException: If node is not connected to the current root
        """
        if self._root is None:
            raise EmptyTreeException()

        current = node
        while current is not self._root:
            parent = self.parent_of(current)
            if parent is None:
                raise NodeNotFoundException(digest=node.hex)
            sibling = sibling_under(current, parent)
            if sibling is not None:
                yield sibling.digest
            current = parent
        yield self._root.digest

    def generate_proof(self, node: MerkleNode) -> list[bytes]:
        """
        Generate an inclusion proof for ``node``.

        Returns:
            Sibling digests ordered leaf-to-root, followed by the root
            digest as the last element

        Raises:
            EmptyTreeException: If the tree has no leaves
            NodeNotFoundException: If node is not connected to the current root
        """
        return list(self.iter_proof(node))

    def generate_proof_for_index(self, index: int) -> list[bytes]:
        """Generate an inclusion proof for the leaf inserted at ``index``."""
        return self.generate_proof(self.get_leaf(index))

    def __repr__(self) -> str:
        root = to_hex(self._root.digest)[:18] + "..." if self._root else None
        return (
            f"StreamingMerkleTree(leaves={len(self._leaves)}, "
            f"size_classes={self.size_classes()}, root={root})"
        )


__all__ = [
    "StreamingMerkleTree",
]
