"""
CLI command modules.
"""

from streamtree_cli.commands import build, prove, demo

__all__ = ["build", "prove", "demo"]
