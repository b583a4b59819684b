"""
Hash Functions

Domain-separated SHA3-256 hashing used to build Diem signing messages.
"""

import hashlib

# Diem prefixes every signed structure with the hash of "DIEM::" + type name
HASH_PREFIX = b"DIEM::"


def sha3_256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA3-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA3-256 hash as bytes (32 bytes)
    """
    return hashlib.sha3_256(input_bytes).digest()


def type_prefix(type_name: str) -> bytes:
    """Return the domain-separation salt for a serialized type name."""
    return sha3_256_bytes(HASH_PREFIX + type_name.encode("ascii"))


def signing_message(type_name: str, serialized: bytes) -> bytes:
    """
    Build the bytes that are signed for a serialized value.

    Args:
        type_name: Diem type name, e.g. "RawTransaction"
        serialized: BCS encoding of the value

    Returns:
        type_prefix(type_name) followed by the serialized bytes
    """
    return type_prefix(type_name) + serialized
