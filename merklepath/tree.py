"""Keccak-256 Merkle tree hashing and path verification."""

from __future__ import annotations

from collections.abc import Sequence

from Crypto.Hash import keccak

HASH_SIZE = 32


def _keccak256(*parts: bytes) -> bytes:
    hasher = keccak.new(digest_bits=256)
    for part in parts:
        hasher.update(part)
    return hasher.digest()


def _as_hash(value: bytes, name: str) -> bytes:
    value = bytes(value)
    if len(value) != HASH_SIZE:
        raise ValueError(f"{name} must be {HASH_SIZE} bytes, got {len(value)}")
    return value


def hash_pair(left: bytes, right: bytes) -> bytes:
    """Return the Keccak-256 hash of two 32-byte values concatenated."""
    return _keccak256(_as_hash(left, "left"), _as_hash(right, "right"))


def verify_merkle_path(
    leaf: bytes,
    root: bytes,
    proof: Sequence[bytes],
    indices: Sequence[bool],
) -> bool:
    """Check that hashing ``leaf`` up through ``proof`` yields ``root``.

    ``indices[i]`` is true when the current hash is the right child at
    level ``i`` (so the sibling goes on the left). A proof and index list of
    different lengths never verifies.
    """
    if len(proof) != len(indices):
        return False

    current = _as_hash(leaf, "leaf")
    expected = _as_hash(root, "root")
    for sibling, is_right in zip(proof, indices):
        if is_right:
            current = hash_pair(sibling, current)
        else:
            current = hash_pair(current, sibling)
    return current == expected


def compute_leaf_hash(data: bytes) -> bytes:
    """Return the Keccak-256 hash of arbitrary data, used as a leaf node."""
    return _keccak256(bytes(data))