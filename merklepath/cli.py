"""Command line demo: build a four-leaf tree and check one path through the program."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from merklepath.guest import ProgramInput, run_program
from merklepath.public_values import PublicValues
from merklepath.tree import compute_leaf_hash, hash_pair, verify_merkle_path

DEFAULT_DATA = "Hello, World!"


@dataclass(frozen=True)
class DemoTree:
    """A four-leaf tree and the proof for its first leaf.

           root
          /    \\
      node1    node2
      /  \\     /  \\
    leaf1 leaf2 leaf3 leaf4
    """

    leaf1: bytes
    leaf2: bytes
    leaf3: bytes
    leaf4: bytes
    node1: bytes
    node2: bytes
    root: bytes

    @property
    def proof(self) -> tuple[bytes, ...]:
        return (self.leaf2, self.node2)

    @property
    def indices(self) -> tuple[bool, ...]:
        return (False, False)

    def program_input(self) -> ProgramInput:
        return ProgramInput(self.leaf1, self.root, self.proof, self.indices)


def build_demo_tree(data: str | bytes) -> DemoTree:
    """Build the demo tree whose first leaf is the hash of ``data``."""
    if isinstance(data, str):
        data = data.encode()
    leaf1 = compute_leaf_hash(data)
    leaf2 = compute_leaf_hash(b"data2")
    leaf3 = compute_leaf_hash(b"data3")
    leaf4 = compute_leaf_hash(b"data4")
    node1 = hash_pair(leaf1, leaf2)
    node2 = hash_pair(leaf3, leaf4)
    return DemoTree(leaf1, leaf2, leaf3, leaf4, node1, node2, hash_pair(node1, node2))


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise RuntimeError(message)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="merkle-tree", description="Verify a Merkle tree path."
    )
    parser.add_argument("--execute", action="store_true", help="execute the program")
    parser.add_argument("--prove", action="store_true", help="commit and check public values")
    parser.add_argument("--data", default=DEFAULT_DATA, help="data hashed into the first leaf")
    args = parser.parse_args(argv)

    if args.execute == args.prove:
        print("Error: You must specify either --execute or --prove", file=sys.stderr)
        return 1

    tree = build_demo_tree(args.data)
    print(f"Data: {args.data}")
    print(f'Leaf hash: "{tree.leaf1.hex()}"')
    print(f'Root hash: "{tree.root.hex()}"')
    print(f"Proof length: {len(tree.proof)}")

    local = verify_merkle_path(tree.leaf1, tree.root, tree.proof, tree.indices)
    print(f"Local verification result: {str(local).lower()}")

    stdin = tree.program_input().to_bytes()
    committed = run_program(ProgramInput.from_bytes(stdin))

    if args.execute:
        print("Program executed successfully.")
        output = PublicValues.decode(committed)
        print(f'Output leaf: "{output.leaf.hex()}"')
        print(f'Output root: "{output.root.hex()}"')
        print(f"Is valid: {str(output.is_valid).lower()}")
        _check(output.leaf == tree.leaf1, "output leaf does not match")
        _check(output.root == tree.root, "output root does not match")
        _check(output.is_valid, "path did not verify")
        print("Merkle path verification successful!")
    else:
        print(f"Public Values: 0x{committed.hex()}")
        expected = PublicValues(tree.leaf1, tree.root, local).encode()
        _check(committed == expected, "committed public values do not match")
        print("Successfully verified public values!")
    return 0


if __name__ == "__main__":
    sys.exit(main())