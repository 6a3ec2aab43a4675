# merklepath

Verify Merkle tree paths built from Keccak-256 hashes. The package also
encodes the result of a check as ABI public values: `bytes32 leaf`,
`bytes32 root`, `bool is_valid`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing and path verification

`merklepath.tree` has three functions:

- `compute_leaf_hash(data)` returns the Keccak-256 hash of any bytes.
- `hash_pair(left, right)` returns the Keccak-256 hash of two 32-byte values
  joined together.
- `verify_merkle_path(leaf, root, proof, indices)` starts from `leaf`. It
  hashes in each sibling from `proof` in turn and compares the result with
  `root`.

```python
from merklepath.tree import compute_leaf_hash, hash_pair, verify_merkle_path

leaf1 = compute_leaf_hash(b"data1")
leaf2 = compute_leaf_hash(b"data2")
root = hash_pair(leaf1, leaf2)

# False: the current hash goes on the left, the sibling on the right.
assert verify_merkle_path(leaf1, root, [leaf2], [False])
# True: the sibling goes on the left, the current hash on the right.
assert verify_merkle_path(leaf2, root, [leaf1], [True])
```

If `proof` and `indices` have different lengths, `verify_merkle_path`
returns `False`. A leaf, root or sibling that is not exactly 32 bytes
raises `ValueError`.

## Public values

`merklepath.public_values.PublicValues` is a frozen dataclass with the
fields `leaf`, `root` and `is_valid`. `encode()` returns the 96-byte ABI
encoding: two 32-byte words, then a 32-byte big-endian word holding 0 or 1.
`PublicValues.decode(data)` reads that encoding back. It raises
`ValueError` if the length is wrong or if the boolean word is not 0 or 1.

```python
from merklepath.public_values import PublicValues

values = PublicValues(leaf=leaf1, root=root, is_valid=True)
encoded = values.encode()
assert len(encoded) == 96
assert PublicValues.decode(encoded) == values
```

## The verification program

`merklepath.guest.ProgramInput` holds the leaf, the expected root, the
sibling hashes (`proof`) and the left/right flags (`indices`).
`run_program(program_input)` checks the path and returns the encoded
public values.

```python
from merklepath.guest import ProgramInput, run_program

program_input = ProgramInput(leaf=leaf1, root=root, proof=[leaf2], indices=[False])
output = run_program(program_input)
assert PublicValues.decode(output).is_valid
```

`ProgramInput.to_bytes()` writes the input in this order:

1. the leaf
2. the root
3. the number of siblings, as a little-endian 32-bit integer
4. each sibling
5. one byte (0 or 1) for each flag

`to_bytes()` raises `ValueError` if `proof` and `indices` differ in length.
`ProgramInput.from_bytes(data)` parses the same layout. It raises
`ValueError` on short input, on a flag byte other than 0 or 1, and on
trailing bytes.

## Command line

The `merklepath` command builds a four-leaf tree, `merklepath.cli.DemoTree`.
The first leaf is the hash of `--data`, which defaults to `Hello, World!`.
The other three leaves are the hashes of `data2`, `data3` and `data4`.
`build_demo_tree(data)` builds the same tree from library code.

The command prints the leaf hash, the root hash and the proof length. It
then verifies the path of the first leaf locally and runs the verification
program on the serialised input.

```
merklepath --execute
merklepath --execute --data "some other text"
merklepath --prove
```

- `--execute` decodes the public values the program returns and prints
  them. It then checks that they match the tree and that the path is valid.
- `--prove` prints the returned public values as hex. It then checks them
  against the encoding of the local result.

Give exactly one of `--execute` or `--prove`. With neither, or with both,
the command prints an error and exits with status 1. If a check fails, the
command raises `RuntimeError`.

## What this package does not do

The package runs the check directly in Python. `--prove` does not make a
succinct or zero-knowledge proof. The package has no verification key, no
proof bytes and no fixtures for on-chain verification contracts. What it
offers is the hashing, the path check, the input format and the public
values encoding.