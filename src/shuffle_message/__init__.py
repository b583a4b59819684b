"""
Shuffle Message Client

Builds, signs, and submits set_message transactions to a Diem/Shuffle dev
node and decodes MessageHolder resources back into text.
"""

from .config import ShuffleConfig
from .api_client import DevApiClient, BCS_SIGNED_TRANSACTION
from .message import MessageClient
from .resources import Resource, messages_from, decoded_messages, hex_to_ascii
from .signers import KeyFileSigner
from .tx import (
    RawTransaction,
    SignedTransaction,
    TransactionPayload,
    Script,
    set_message_transaction_payload,
    set_message_raw_transaction,
)
from .runtime.address import AccountAddress
from .runtime.errors import *

__version__ = "0.1.0"
__all__ = [
    # Clients
    "MessageClient",
    "DevApiClient",
    "ShuffleConfig",
    "KeyFileSigner",

    # Transactions
    "RawTransaction",
    "SignedTransaction",
    "TransactionPayload",
    "Script",
    "set_message_transaction_payload",
    "set_message_raw_transaction",

    # Resources
    "Resource",
    "messages_from",
    "decoded_messages",
    "hex_to_ascii",

    # Core types
    "AccountAddress",
    "BCS_SIGNED_TRANSACTION",

    # Errors
    "ErrorCode",
    "ShuffleError",
    "ConfigurationError",
    "KeyFileError",
    "InvalidAddressError",
    "ValidationError",
    "MissingSequenceNumberError",
    "EncodingError",
    "NetworkError",
    "SubmissionError",
    "ResponseDecodeError",
    "AccountNotFoundError",
    "ResourceDecodeError",
    "MissingFieldError",
]
