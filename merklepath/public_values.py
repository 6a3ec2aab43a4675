"""ABI encoding of the values a Merkle path check commits to."""

from __future__ import annotations

from dataclasses import dataclass

from merklepath.tree import HASH_SIZE

_WORD = 32
ENCODED_SIZE = 3 * _WORD


@dataclass(frozen=True)
class PublicValues:
    """The leaf, root and verification result, ABI-encoded as a static struct."""

    leaf: bytes
    root: bytes
    is_valid: bool

    def __post_init__(self) -> None:
        for name in ("leaf", "root"):
            value = bytes(getattr(self, name))
            if len(value) != HASH_SIZE:
                raise ValueError(f"{name} must be {HASH_SIZE} bytes, got {len(value)}")
            object.__setattr__(self, name, value)
        object.__setattr__(self, "is_valid", bool(self.is_valid))

    def encode(self) -> bytes:
        """Return the 96-byte ABI encoding (bytes32, bytes32, bool)."""
        flag = int(self.is_valid).to_bytes(_WORD, "big")
        return self.leaf + self.root + flag

    @classmethod
    def decode(cls, data: bytes) -> PublicValues:
        """Parse an ABI encoding produced by :meth:`encode`."""
        data = bytes(data)
        if len(data) != ENCODED_SIZE:
            raise ValueError(
                f"encoded public values must be {ENCODED_SIZE} bytes, got {len(data)}"
            )
        flag = int.from_bytes(data[2 * _WORD:], "big")
        if flag not in (0, 1):
            raise ValueError("boolean word is not 0 or 1")
        return cls(data[:_WORD], data[_WORD:2 * _WORD], flag == 1)