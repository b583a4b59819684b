"""
Ed25519 signer backed by a Shuffle key file.

The key file holds a one-byte key type tag followed by the 32-byte Ed25519
private key. The file is read on every signing call; key material is never
kept on the signer.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from ..crypto.ed25519 import Ed25519Error, Ed25519PrivateKey, KEY_LENGTH
from ..runtime.errors import KeyFileError
from ..tx.types import Ed25519Authenticator, RawTransaction, SignedTransaction

logger = logging.getLogger(__name__)

# Leading key type byte written by the Shuffle key generator
KEY_TYPE_TAG_LENGTH = 1


def load_private_key(key_path: Union[str, Path]) -> Ed25519PrivateKey:
    """
    Read a key file and strip its type tag.

    Raises:
        KeyFileError: If the file cannot be read or holds no usable key
    """
    key_path = Path(key_path)
    try:
        key_bytes = key_path.read_bytes()
    except OSError as e:
        raise KeyFileError(
            f"Cannot read private key file: {key_path}",
            details={"path": str(key_path)},
            cause=e,
        ) from e

    key_bytes = key_bytes[KEY_TYPE_TAG_LENGTH:]
    try:
        return Ed25519PrivateKey(key_bytes[:KEY_LENGTH])
    except Ed25519Error as e:
        raise KeyFileError(
            f"Private key file does not hold an Ed25519 key: {key_path}",
            details={"path": str(key_path), "length": len(key_bytes)},
            cause=e,
        ) from e


class KeyFileSigner:
    """Signs raw transactions with the key stored at key_path."""

    def __init__(self, key_path: Union[str, Path]):
        self.key_path = Path(key_path)

    def sign_transaction(self, raw_txn: RawTransaction, signing_msg: bytes) -> bytes:
        """
        Sign a raw transaction and return the wire-encoded signed transaction.

        Args:
            raw_txn: Transaction to sign
            signing_msg: raw_txn.signing_message(), computed by the caller

        Returns:
            BCS bytes of the SignedTransaction
        """
        private_key = load_private_key(self.key_path)
        signature = private_key.sign(signing_msg)
        signed = SignedTransaction(
            raw_txn=raw_txn,
            authenticator=Ed25519Authenticator(
                public_key=private_key.public_key().to_bytes(),
                signature=signature,
            ),
        )
        wire = signed.to_bcs()
        logger.debug("Signed transaction for %s (%d bytes)",
                     raw_txn.sender.to_hex_literal(), len(wire))
        return wire

    def signed_transaction_hex(self, raw_txn: RawTransaction, signing_msg: bytes) -> str:
        """Hex form of sign_transaction()."""
        return self.sign_transaction(raw_txn, signing_msg).hex()

    def public_key(self) -> bytes:
        """Public key bytes of the key currently on disk."""
        return load_private_key(self.key_path).public_key().to_bytes()
