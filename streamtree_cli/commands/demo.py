"""
Module 09 - CLI Demo Command

Walk through four sample transactions, printing the frontier after
each insertion and the proof size for the first leaf.

Usage:
    streamtree demo [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace
from typing import Any

from streamtree.crypto.hashing import get_hash_function, to_hex
from streamtree.merkle import MerkleNode, StreamingMerkleTree
from streamtree_cli.commands.build import EXIT_SUCCESS, resolve_hash_algorithm


DEMO_TRANSACTIONS: tuple[bytes, ...] = (
    b"1 transaction",
    b"2 transaction",
    b"3 transaction",
    b"4 transaction",
)


def run_demo(hash_algorithm: str) -> dict[str, Any]:
    """Run the demonstration and return its observations."""
    hash_fn = get_hash_function(hash_algorithm)
    tree = StreamingMerkleTree(hash_algorithm=hash_algorithm)
    nodes = [MerkleNode.leaf(value, hash_fn) for value in DEMO_TRANSACTIONS]

    steps = []
    for node in nodes:
        tree.append_node(node)
        steps.append({
            "leaves": len(tree),
            "size_classes": tree.size_classes(),
            "root": to_hex(tree.current_root_digest()),
        })

    proof = tree.generate_proof(nodes[0])
    return {
        "hash_algorithm": hash_algorithm,
        "steps": steps,
        "proof_size": len(proof),
    }


def demo_cmd(args: Namespace) -> int:
    """Execute the demo command."""
    result = run_demo(resolve_hash_algorithm(args))

    if args.json:
        print(json.dumps(result, indent=2))
        return EXIT_SUCCESS

    for step in result["steps"]:
        classes = ", ".join(str(s) for s in step["size_classes"])
        print(f"{step['leaves']} node(s): size_classes={{{classes}}} root={step['root'][:18]}...")
    print(f"Proof Size: {result['proof_size']}")
    return EXIT_SUCCESS
