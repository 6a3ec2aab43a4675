"""Keccak-256 Merkle path verification, ABI-encoded public values and a demo command."""

__version__ = "0.1.0"
__all__ = ["tree", "public_values", "guest", "cli"]