"""
Module 02 - Merkle Proof Export
Thin wrappers turning raw tree proofs into exportable models.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- MerkleProver: build InclusionProof / FrontierSummary views of a tree

These are convenience wrappers around StreamingMerkleTree. The raw
proof returned by the tree stays the source of truth.
"""
from __future__ import annotations

from streamtree.crypto.hashing import to_hex
from streamtree.merkle.merkle_node import MerkleNode
from streamtree.merkle.streaming_tree import StreamingMerkleTree
from streamtree.schemas.proof import FrontierSummary, InclusionProof


class MerkleProver:
    """
    Convenience class for exporting proofs and frontier state.

    Example:
        >>> tree = StreamingMerkleTree.from_values([b"a", b"b", b"c"])
        >>> proof = MerkleProver.prove_index(tree, 1)
        >>> proof.root == to_hex(tree.current_root_digest())
        True
    """

    @staticmethod
    def prove(tree: StreamingMerkleTree, node: MerkleNode) -> InclusionProof:
        """
        Generate an exportable inclusion proof for a leaf node.

        Raises:
            NodeNotFoundException: If node is not a leaf connected to the root
        """
        index = tree.index_of(node)
        digests = tree.generate_proof(node)
        return InclusionProof(
            hash_algorithm=tree.hash_algorithm,
            leaf_index=index,
            tree_size=len(tree),
            leaf_digest=to_hex(node.digest),
            siblings=[to_hex(d) for d in digests[:-1]],
            root=to_hex(digests[-1]),
        )

    @staticmethod
    def prove_index(tree: StreamingMerkleTree, index: int) -> InclusionProof:
        """
        Generate an exportable inclusion proof for the leaf at ``index``.

        Raises:
            IndexError: If index is out of range
        """
        return MerkleProver.prove(tree, tree.get_leaf(index))

    @staticmethod
    def summarize(tree: StreamingMerkleTree) -> FrontierSummary:
        """Snapshot the tree's size-classes and root."""
        root = tree.current_root_digest()
        return FrontierSummary(
            hash_algorithm=tree.hash_algorithm,
            tree_size=len(tree),
            size_classes=tree.size_classes(),
            root=to_hex(root) if root is not None else None,
        )


__all__ = [
    "MerkleProver",
]
