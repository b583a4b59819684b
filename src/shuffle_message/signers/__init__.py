"""Transaction signers"""

from .key_file import KeyFileSigner, load_private_key

__all__ = [
    "KeyFileSigner",
    "load_private_key",
]
