"""
Module 09 - CLI Build Command

Build a tree from a file with one leaf per line and report the
frontier and root.

Usage:
    streamtree build leaves.txt [--json]
    cat leaves.txt | streamtree build -
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from streamtree.merkle import MerkleProver, StreamingMerkleTree
from streamtree.schemas.proof import FrontierSummary


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def read_leaves(source: str) -> list[bytes]:
    """
    Read leaf values, one per line, from a file path or "-" for stdin.

    Line endings are stripped; every other byte is part of the leaf.
    """
    if source == "-":
        data = sys.stdin.buffer.read()
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Leaf file not found: {path}")
        data = path.read_bytes()
    return data.splitlines()


def resolve_hash_algorithm(args: Namespace) -> str:
    """Command-line flag wins over the loaded configuration."""
    if getattr(args, "hash_algorithm", None):
        return args.hash_algorithm
    return args.runtime_config.tree.hash_algorithm


def build_tree(args: Namespace) -> StreamingMerkleTree:
    """Build a tree from the leaves named by ``args.source``."""
    leaves = read_leaves(args.source)
    algorithm = resolve_hash_algorithm(args)
    logger.info(f"Building tree from {len(leaves)} leaves ({algorithm})")
    return StreamingMerkleTree.from_values(leaves, hash_algorithm=algorithm)


def print_summary_human(summary: FrontierSummary) -> None:
    """Print summary in human-readable format."""
    print(f"hash_algorithm: {summary.hash_algorithm}")
    print(f"leaves: {summary.tree_size}")
    print(f"size_classes: {', '.join(str(s) for s in summary.size_classes) or '(none)'}")
    print(f"root: {summary.root or '(empty)'}")


def build_cmd(args: Namespace) -> int:
    """
    Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        tree = build_tree(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = MerkleProver.summarize(tree)
    if args.json:
        print(json.dumps(summary.model_dump(), indent=2))
    else:
        print_summary_human(summary)
    return EXIT_SUCCESS
