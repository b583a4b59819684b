"""
BCS Codec Module

Binary Canonical Serialization for Diem transactions.

Key components:
- writer.py: BCS writer with ULEB128/fixed-width integer encoding
- reader.py: BCS reader decoding the same primitives
- hashes.py: SHA3-256 domain-separated signing messages
"""

from .hashes import sha3_256_bytes, signing_message, type_prefix
from .reader import BinaryReader
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "sha3_256_bytes",
    "signing_message",
    "type_prefix",
]
