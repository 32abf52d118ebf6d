"""
Module 02 - Merkle Node Unit Tests
Tests for streamtree/merkle/merkle_node.py
"""
import gc

import pytest

from streamtree.crypto.hashing import get_hash_function, sha256
from streamtree.merkle.merkle_node import MerkleNode, sibling_under
from streamtree.schemas.errors import (
    ErrorCodes,
    InvalidLeafException,
    InvalidNodeException,
    ParentAlreadyAssignedException,
)


class TestLeafConstruction:
    """Tests for MerkleNode.leaf()."""

    def test_leaf_digest_is_hash_of_value(self):
        node = MerkleNode.leaf(b"1 transaction")
        assert node.digest == sha256(b"1 transaction")

    def test_leaf_keeps_value(self):
        node = MerkleNode.leaf(b"payload")
        assert node.value == b"payload"
        assert node.is_leaf

    def test_leaf_has_no_links(self):
        node = MerkleNode.leaf(b"x")
        assert node.left is None
        assert node.right is None
        assert node.parent is None

    def test_leaf_with_custom_hash(self):
        sha3 = get_hash_function("sha3_256")
        node = MerkleNode.leaf(b"x", sha3)
        assert node.digest == sha3(b"x")

    def test_leaf_copies_mutable_input(self):
        data = bytearray(b"abc")
        node = MerkleNode.leaf(data)
        data[0] = ord("z")

        assert node.value == b"abc"
        assert node.digest == sha256(b"abc")

    def test_leaf_rejects_str(self):
        with pytest.raises(InvalidLeafException) as exc_info:
            MerkleNode.leaf("not bytes")  # type: ignore[arg-type]
        assert exc_info.value.code == ErrorCodes.INVALID_LEAF


class TestCombine:
    """Tests for MerkleNode.combine()."""

    def test_internal_digest_is_hash_of_concat(self):
        left = MerkleNode.leaf(b"left")
        right = MerkleNode.leaf(b"right")

        node = MerkleNode.combine(left, right)

        assert node.digest == sha256(left.digest + right.digest)

    def test_order_matters(self):
        a = MerkleNode.leaf(b"a")
        b = MerkleNode.leaf(b"b")
        assert MerkleNode.combine(a, b).digest != MerkleNode.combine(b, a).digest

    def test_combine_owns_children_but_sets_no_parent(self):
        left = MerkleNode.leaf(b"l")
        right = MerkleNode.leaf(b"r")

        node = MerkleNode.combine(left, right)

        assert node.left is left
        assert node.right is right
        assert left.parent is None
        assert right.parent is None

    def test_combine_missing_child_raises(self):
        leaf = MerkleNode.leaf(b"alone")
        with pytest.raises(InvalidNodeException):
            MerkleNode.combine(leaf, None)
        with pytest.raises(InvalidNodeException):
            MerkleNode.combine(None, leaf)

    def test_internal_node_has_no_value(self):
        node = MerkleNode.combine(MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b"))
        assert not node.is_leaf
        with pytest.raises(InvalidNodeException):
            node.value


class TestOwnerLink:
    """Tests for the one-time owning-tree record on a leaf."""

    class _Owner:
        pass

    def test_claim_once(self):
        node = MerkleNode.leaf(b"a")
        owner = self._Owner()
        assert not node.claimed
        assert node.owner is None

        node.claim(owner)

        assert node.claimed
        assert node.owner is owner

    def test_second_claim_raises(self):
        node = MerkleNode.leaf(b"a")
        first = self._Owner()
        node.claim(first)

        with pytest.raises(InvalidLeafException, match="already belongs"):
            node.claim(self._Owner())
        assert node.owner is first

    def test_claim_survives_collected_owner(self):
        node = MerkleNode.leaf(b"a")
        owner = self._Owner()
        node.claim(owner)
        del owner
        gc.collect()

        assert node.owner is None
        assert node.claimed


class TestParentLink:
    """Tests for the one-time weak parent link."""

    def test_set_parent_once(self):
        left, right = MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b")
        parent = MerkleNode.combine(left, right)

        left.set_parent(parent)

        assert left.parent is parent

    def test_second_assignment_raises(self):
        left, right = MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b")
        parent = MerkleNode.combine(left, right)
        left.set_parent(parent)

        other = MerkleNode.combine(left, MerkleNode.leaf(b"c"))
        with pytest.raises(ParentAlreadyAssignedException):
            left.set_parent(other)
        assert left.parent is parent

    def test_parent_must_own_child(self):
        stranger = MerkleNode.leaf(b"stranger")
        parent = MerkleNode.combine(MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b"))

        with pytest.raises(InvalidNodeException):
            stranger.set_parent(parent)

    def test_parent_link_is_weak(self):
        left, right = MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b")
        parent = MerkleNode.combine(left, right)
        left.set_parent(parent)

        del parent
        gc.collect()

        assert left.parent is None

    def test_merged_outlives_collected_parent(self):
        left, right = MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b")
        assert not left.merged

        parent = MerkleNode.combine(left, right)
        left.set_parent(parent)
        del parent
        gc.collect()

        assert left.parent is None
        assert left.merged

    def test_digest_is_read_only(self):
        node = MerkleNode.leaf(b"a")
        with pytest.raises(AttributeError):
            node.digest = b"tampered"


class TestSibling:
    """Tests for sibling lookup."""

    def test_sibling_of_each_child(self):
        left, right = MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b")
        parent = MerkleNode.combine(left, right)
        left.set_parent(parent)
        right.set_parent(parent)

        assert left.sibling() is right
        assert right.sibling() is left

    def test_no_parent_no_sibling(self):
        assert MerkleNode.leaf(b"a").sibling() is None

    def test_sibling_under_non_child(self):
        parent = MerkleNode.combine(MerkleNode.leaf(b"a"), MerkleNode.leaf(b"b"))
        assert sibling_under(MerkleNode.leaf(b"c"), parent) is None


class TestIdentity:
    """Nodes compare by identity, not digest."""

    def test_equal_digests_distinct_nodes(self):
        a1 = MerkleNode.leaf(b"same")
        a2 = MerkleNode.leaf(b"same")

        assert a1.digest == a2.digest
        assert a1 != a2
        assert len({a1, a2}) == 2

    def test_repr_and_hex(self):
        node = MerkleNode.leaf(b"a")
        assert node.hex == "0x" + sha256(b"a").hex()
        assert "leaf" in repr(node)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
