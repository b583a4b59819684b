"""
Transaction builders for the Message module.

Turns a sender, a message, and a sequence number into a RawTransaction with
the fixed gas and expiration defaults used against a local dev node.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from ..runtime.address import AccountAddress
from ..runtime.errors import ValidationError
from .stdlib import decode_set_message_script, encode_set_message_script
from .types import RawTransaction, TransactionPayload

logger = logging.getLogger(__name__)

DEFAULT_MAX_GAS_AMOUNT = 1_000_000
DEFAULT_GAS_UNIT_PRICE = 0
DEFAULT_GAS_CURRENCY_CODE = "XUS"
DEFAULT_EXPIRATION_SECS = 10
# ChainId::test()
DEFAULT_CHAIN_ID = 4


def new_raw_transaction(
    sender_str: str,
    payload: TransactionPayload,
    sequence_number: int,
    max_gas_amount: int = DEFAULT_MAX_GAS_AMOUNT,
    gas_unit_price: int = DEFAULT_GAS_UNIT_PRICE,
    gas_currency_code: str = DEFAULT_GAS_CURRENCY_CODE,
    expiration_timestamp_secs: Optional[int] = None,
    chain_id: int = DEFAULT_CHAIN_ID,
) -> RawTransaction:
    """
    Wrap a payload in a RawTransaction.

    Args:
        sender_str: Hex address, e.g. 0x24163afcc6e33b0a9473852e18327fa9
        payload: Transaction payload
        sequence_number: Sender's current on-chain sequence number
        expiration_timestamp_secs: Defaults to now plus DEFAULT_EXPIRATION_SECS

    Raises:
        InvalidAddressError: If sender_str is not a valid address
        ValidationError: If the sequence number or a default is out of range
    """
    if not isinstance(sequence_number, int) or isinstance(sequence_number, bool) or sequence_number < 0:
        raise ValidationError(
            f"Sequence number must be a non-negative integer, got {sequence_number!r}"
        )

    sender = AccountAddress.from_hex(sender_str)
    if expiration_timestamp_secs is None:
        expiration_timestamp_secs = int(time.time()) + DEFAULT_EXPIRATION_SECS

    try:
        return RawTransaction(
            sender=sender,
            sequence_number=sequence_number,
            payload=payload,
            max_gas_amount=max_gas_amount,
            gas_unit_price=gas_unit_price,
            gas_currency_code=gas_currency_code,
            expiration_timestamp_secs=expiration_timestamp_secs,
            chain_id=chain_id,
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid transaction fields: {e}", cause=e) from e


def set_message_transaction_payload(message: str, code: bytes) -> TransactionPayload:
    """Encode message as a set_message script payload."""
    script = encode_set_message_script(message.encode("utf-8"), code)
    return TransactionPayload(script=script)


def set_message_raw_transaction(
    sender_str: str,
    message: str,
    sequence_number: int,
    code: bytes,
) -> RawTransaction:
    """Build an unsigned set_message transaction for sender_str."""
    payload = set_message_transaction_payload(message, code)
    raw_txn = new_raw_transaction(sender_str, payload, sequence_number)
    logger.debug("Built set_message transaction for %s at sequence %d",
                 raw_txn.sender.to_hex_literal(), sequence_number)
    return raw_txn


def message_from_payload(payload: TransactionPayload) -> str:
    """Inverse of set_message_transaction_payload."""
    return decode_set_message_script(payload.script).decode("utf-8")
