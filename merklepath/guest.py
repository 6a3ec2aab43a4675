"""The verifying program: reads a serialized input, checks the path, commits the result."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, field

from merklepath.public_values import PublicValues
from merklepath.tree import HASH_SIZE, verify_merkle_path

_LEN = struct.Struct("<I")


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("input ended unexpectedly")
        chunk = bytes(self._data[self._pos:end])
        self._pos = end
        return chunk

    def take_bool(self) -> bool:
        byte = self.take(1)[0]
        if byte not in (0, 1):
            raise ValueError(f"invalid boolean byte {byte}")
        return byte == 1

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos


@dataclass(frozen=True)
class ProgramInput:
    """Leaf, expected root, sibling hashes and left/right flags for one path."""

    leaf: bytes
    root: bytes
    proof: Sequence[bytes] = field(default_factory=tuple)
    indices: Sequence[bool] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "leaf", bytes(self.leaf))
        object.__setattr__(self, "root", bytes(self.root))
        object.__setattr__(self, "proof", tuple(bytes(p) for p in self.proof))
        object.__setattr__(self, "indices", tuple(bool(i) for i in self.indices))
        for value in (self.leaf, self.root, *self.proof):
            if len(value) != HASH_SIZE:
                raise ValueError(f"hashes must be {HASH_SIZE} bytes, got {len(value)}")

    def to_bytes(self) -> bytes:
        """Serialize as leaf, root, u32 LE count, siblings, then one byte per flag."""
        if len(self.proof) != len(self.indices):
            raise ValueError("proof and indices must have the same length")
        return b"".join(
            (
                self.leaf,
                self.root,
                _LEN.pack(len(self.proof)),
                *self.proof,
                bytes(int(flag) for flag in self.indices),
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> ProgramInput:
        """Parse the serialization written by :meth:`to_bytes`."""
        reader = _Reader(bytes(data))
        leaf = reader.take(HASH_SIZE)
        root = reader.take(HASH_SIZE)
        (count,) = _LEN.unpack(reader.take(_LEN.size))
        proof = [reader.take(HASH_SIZE) for _ in range(count)]
        indices = [reader.take_bool() for _ in range(count)]
        if reader.remaining:
            raise ValueError(f"{reader.remaining} trailing bytes after input")
        return cls(leaf, root, proof, indices)


def run_program(program_input: ProgramInput) -> bytes:
    """Verify the path and return the ABI-encoded public values."""
    is_valid = verify_merkle_path(
        program_input.leaf,
        program_input.root,
        program_input.proof,
        program_input.indices,
    )
    return PublicValues(program_input.leaf, program_input.root, is_valid).encode()