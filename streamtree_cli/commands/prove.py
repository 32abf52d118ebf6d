"""
Module 09 - CLI Prove Command

Build a tree from a leaf file and print the inclusion proof for one leaf.

Usage:
    streamtree prove leaves.txt --index 2 [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from streamtree.merkle import MerkleProver
from streamtree.schemas.errors import NodeNotFoundException
from streamtree.schemas.proof import InclusionProof
from streamtree_cli.commands.build import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, build_tree


logger = logging.getLogger(__name__)


EXIT_NOT_FOUND = 2


def print_proof_human(proof: InclusionProof) -> None:
    print(f"leaf_index: {proof.leaf_index}")
    print(f"tree_size: {proof.tree_size}")
    print(f"leaf: {proof.leaf_digest}")
    print(f"siblings ({proof.depth}):")
    for digest in proof.siblings:
        print(f"  {digest}")
    print(f"root: {proof.root}")


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    Returns:
        Exit code (2 when the requested leaf does not exist)
    """
    try:
        tree = build_tree(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        proof = MerkleProver.prove_index(tree, args.index)
    except IndexError as e:
        if args.json:
            error = NodeNotFoundException(str(e), details={"index": args.index})
            print(json.dumps(error.to_error_model().model_dump(), indent=2))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND

    logger.debug(f"Proof for leaf {args.index}: {proof.depth} siblings")
    if args.json:
        print(proof.model_dump_json(indent=2))
    else:
        print_proof_human(proof)
    return EXIT_SUCCESS
