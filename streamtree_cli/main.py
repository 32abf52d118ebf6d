"""
Module 09 - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m streamtree_cli build <file|-> [--json]
    python -m streamtree_cli prove <file|-> --index N [--json]
    python -m streamtree_cli demo [--json]
    python -m streamtree_cli config --show
    python -m streamtree_cli config --init [--path streamtree.yaml]

Environment Variables:
    STREAMTREE_HASH_ALGORITHM   hashlib algorithm for leaves and nodes (default: sha256)
    STREAMTREE_LOG_LEVEL        Log level (default: INFO)
    STREAMTREE_LOG_FILE         Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from streamtree.config.runtime import RuntimeConfig, get_default_config_template
from streamtree.schemas.errors import StreamTreeException
from streamtree_cli.commands import build, demo, prove


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from a YAML file and/or environment.

    Environment variables override file settings.
    """
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()
    return RuntimeConfig.from_env()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="streamtree",
        description="streamtree CLI - Build append-only Merkle trees and export inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--hash-algorithm",
        type=str,
        default=None,
        help="hashlib algorithm name (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Build a tree from a leaf file",
        description="Insert one leaf per line and report the frontier and root.",
    )
    build_parser.add_argument(
        "source",
        type=str,
        help="Path to leaf file, or '-' for stdin",
    )
    build_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    build_parser.set_defaults(func=build.build_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Generate an inclusion proof for one leaf",
        description="Build a tree from a leaf file and print the proof for one leaf.",
    )
    prove_parser.add_argument(
        "source",
        type=str,
        help="Path to leaf file, or '-' for stdin",
    )
    prove_parser.add_argument(
        "--index", "-i",
        type=int,
        required=True,
        help="0-based index of the leaf to prove",
    )
    prove_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON proof",
    )
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- demo command ---
    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the four-transaction demonstration",
    )
    demo_parser.add_argument("--json", action="store_true", help="JSON output")
    demo_parser.set_defaults(func=demo.demo_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="streamtree.yaml",
        help="Path for config file (default: streamtree.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (STREAMTREE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: streamtree config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=leaf not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (FileNotFoundError, StreamTreeException) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except StreamTreeException as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
