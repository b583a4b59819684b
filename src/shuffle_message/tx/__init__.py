"""
Transaction types, script encoders, and builders for the Message module.
"""

from .types import (
    ArgumentType,
    PayloadType,
    AuthenticatorType,
    TransactionArgument,
    Script,
    TransactionPayload,
    RawTransaction,
    Ed25519Authenticator,
    SignedTransaction,
)
from .stdlib import (
    load_script_code,
    encode_set_message_script,
    decode_set_message_script,
)
from .builder import (
    new_raw_transaction,
    set_message_transaction_payload,
    set_message_raw_transaction,
    message_from_payload,
)

__all__ = [
    "ArgumentType",
    "PayloadType",
    "AuthenticatorType",
    "TransactionArgument",
    "Script",
    "TransactionPayload",
    "RawTransaction",
    "Ed25519Authenticator",
    "SignedTransaction",
    "load_script_code",
    "encode_set_message_script",
    "decode_set_message_script",
    "new_raw_transaction",
    "set_message_transaction_payload",
    "set_message_raw_transaction",
    "message_from_payload",
]
