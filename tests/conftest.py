"""
Pytest configuration and shared fixtures for streamtree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_merkle = importlib.import_module("fixtures.merkle_fixtures")

make_values = _merkle.make_values

from streamtree.config.runtime import set_default_config  # noqa: E402
from streamtree.merkle import StreamingMerkleTree  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def empty_tree():
    """Provide a fresh SHA-256 tree with no leaves."""
    return StreamingMerkleTree()


@pytest.fixture
def transactions():
    """The four sample transactions."""
    return [b"1 transaction", b"2 transaction", b"3 transaction", b"4 transaction"]


@pytest.fixture
def seven_leaf_tree():
    """Provide a tree with 7 leaves (frontier {1, 2, 4})."""
    return StreamingMerkleTree.from_values(make_values(7))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep STREAMTREE_* settings from the outer shell out of tests."""
    for name in ("STREAMTREE_HASH_ALGORITHM", "STREAMTREE_LOG_LEVEL", "STREAMTREE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
