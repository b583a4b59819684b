"""Cryptographic primitives for transaction signing"""

from .ed25519 import Ed25519Error, Ed25519PrivateKey, Ed25519PublicKey

__all__ = [
    "Ed25519Error",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
]
