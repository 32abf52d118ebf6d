"""
Module 02 - Streaming Merkle Tree
Incremental Merkle construction + inclusion proof generation.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- MerkleNode: immutable digest node with a one-time weak parent link
- StreamingMerkleTree: frontier-based append-only tree
- MerkleProver: exportable proof / frontier views

Commitment Rules:
1. Leaf digest: H(value)
2. Parent digest: H(left || right)
3. Insertion: binary-counter merge, new carry on the left
4. Root: pair frontier entries smallest size-class first, promote
   an odd leftover unchanged
5. Empty tree: no root

Usage:
    from streamtree.merkle import StreamingMerkleTree

    tree = StreamingMerkleTree()
    tree.insert(b"1 transaction")
    tree.insert(b"2 transaction")

    proof = tree.generate_proof(tree.get_leaf(0))
    assert proof[-1] == tree.current_root_digest()
"""
from .merkle_node import (
    MerkleNode,
    sibling_under,
)

from .streaming_tree import (
    StreamingMerkleTree,
)

from .merkle_proofs import (
    MerkleProver,
)


__all__ = [
    "MerkleNode",
    "sibling_under",
    "StreamingMerkleTree",
    "MerkleProver",
]
