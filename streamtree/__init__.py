"""
streamtree - incremental Merkle tree over an append-only sequence.

Usage:
    from streamtree import StreamingMerkleTree

    tree = StreamingMerkleTree()
    tree.insert(b"1 transaction")
    root = tree.current_root_digest()
"""

from streamtree.merkle import MerkleNode, MerkleProver, StreamingMerkleTree
from streamtree.schemas.errors import NodeNotFoundException, StreamTreeException

__version__ = "0.1.0"

__all__ = [
    "MerkleNode",
    "MerkleProver",
    "StreamingMerkleTree",
    "NodeNotFoundException",
    "StreamTreeException",
]
