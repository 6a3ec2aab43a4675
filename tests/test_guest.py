import pytest

from merklepath.guest import ProgramInput, run_program
from merklepath.public_values import PublicValues
from merklepath.tree import compute_leaf_hash, hash_pair


def _tree_input():
    leaf1 = compute_leaf_hash(b"data1")
    leaf2 = compute_leaf_hash(b"data2")
    leaf3 = compute_leaf_hash(b"data3")
    leaf4 = compute_leaf_hash(b"data4")
    node2 = hash_pair(leaf3, leaf4)
    root = hash_pair(hash_pair(leaf1, leaf2), node2)
    return ProgramInput(leaf1, root, [leaf2, node2], [False, False])


def test_round_trip():
    program_input = _tree_input()
    assert ProgramInput.from_bytes(program_input.to_bytes()) == program_input


def test_serialized_layout():
    program_input = _tree_input()
    data = program_input.to_bytes()
    assert data[:32] == program_input.leaf
    assert data[32:64] == program_input.root
    assert data[64:68] == b"\x02\x00\x00\x00"
    assert data[-2:] == b"\x00\x00"


def test_run_program_valid_path():
    program_input = _tree_input()
    output = PublicValues.decode(run_program(program_input))
    assert output.leaf == program_input.leaf
    assert output.root == program_input.root
    assert output.is_valid is True


def test_run_program_wrong_root():
    good = _tree_input()
    bad = ProgramInput(good.leaf, compute_leaf_hash(b"other"), good.proof, good.indices)
    assert PublicValues.decode(run_program(bad)).is_valid is False


def test_truncated_input_raises():
    data = _tree_input().to_bytes()
    with pytest.raises(ValueError):
        ProgramInput.from_bytes(data[:-1])


def test_invalid_boolean_raises():
    data = bytearray(_tree_input().to_bytes())
    data[-1] = 7
    with pytest.raises(ValueError):
        ProgramInput.from_bytes(bytes(data))


def test_trailing_bytes_raise():
    with pytest.raises(ValueError):
        ProgramInput.from_bytes(_tree_input().to_bytes() + b"\x00")


def test_mismatched_lengths_cannot_serialize():
    good = _tree_input()
    with pytest.raises(ValueError):
        ProgramInput(good.leaf, good.root, good.proof, [False]).to_bytes()