import pytest

from merklepath.tree import compute_leaf_hash, hash_pair, verify_merkle_path


def test_hash_pair():
    left = bytes([1] * 32)
    right = bytes([2] * 32)
    result = hash_pair(left, right)
    assert result == hash_pair(left, right)
    assert result != hash_pair(right, left)
    assert len(result) == 32


def test_simple_merkle_path():
    leaf1 = compute_leaf_hash(b"data1")
    leaf2 = compute_leaf_hash(b"data2")
    root = hash_pair(leaf1, leaf2)

    assert verify_merkle_path(leaf1, root, [leaf2], [False]) is True
    assert verify_merkle_path(leaf2, root, [leaf1], [True]) is True
    assert verify_merkle_path(leaf1, root, [leaf1], [False]) is False


def test_three_level_merkle_tree():
    leaf1 = compute_leaf_hash(b"data1")
    leaf2 = compute_leaf_hash(b"data2")
    leaf3 = compute_leaf_hash(b"data3")
    leaf4 = compute_leaf_hash(b"data4")

    node1 = hash_pair(leaf1, leaf2)
    node2 = hash_pair(leaf3, leaf4)
    root = hash_pair(node1, node2)

    assert verify_merkle_path(leaf1, root, [leaf2, node2], [False, False]) is True
    assert verify_merkle_path(leaf4, root, [leaf3, node1], [True, True]) is True


def test_keccak_of_empty_input():
    assert compute_leaf_hash(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_empty_proof_compares_leaf_with_root():
    leaf = compute_leaf_hash(b"data1")
    assert verify_merkle_path(leaf, leaf, [], []) is True
    assert verify_merkle_path(leaf, compute_leaf_hash(b"data2"), [], []) is False


def test_length_mismatch_is_invalid():
    leaf1 = compute_leaf_hash(b"data1")
    leaf2 = compute_leaf_hash(b"data2")
    root = hash_pair(leaf1, leaf2)
    assert verify_merkle_path(leaf1, root, [leaf2], [False, True]) is False


def test_hash_pair_rejects_wrong_size():
    with pytest.raises(ValueError):
        hash_pair(b"short", bytes(32))