"""
Module 09 - streamtree CLI

Command-line interface for building streaming Merkle trees.

Usage:
    python -m streamtree_cli build leaves.txt
    python -m streamtree_cli prove leaves.txt --index 0
    python -m streamtree_cli demo
    python -m streamtree_cli config --show
"""

__version__ = "0.1.0"
