"""
On-chain resource records and MessageHolder decoding.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Union

from pydantic import BaseModel, Field

from .runtime.errors import MissingFieldError, ResourceDecodeError

MESSAGE_HOLDER = "MessageHolder"


class Resource(BaseModel):
    """A typed record stored under an account."""
    type_name: str
    raw_value: Dict[str, Any] = Field(default_factory=dict)
    record: Dict[str, Any] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, record: Dict[str, Any]) -> Resource:
        """
        Parse a resource as returned by the accounts/{address}/resources query.

        Raises:
            MissingFieldError: If record has no type.name
        """
        if isinstance(record, Resource):
            return record
        if not isinstance(record, dict):
            raise ResourceDecodeError(f"Resource record must be an object, got {type(record).__name__}")

        type_field = record.get("type")
        if not isinstance(type_field, dict) or not isinstance(type_field.get("name"), str):
            raise MissingFieldError("type.name", details={"record": record})

        value = record.get("value")
        if value is None:
            value = {}
        elif not isinstance(value, dict):
            raise ResourceDecodeError("Resource value must be an object", details={"record": record})

        return cls(type_name=type_field["name"], raw_value=value, record=record)

    @property
    def message(self) -> str:
        """
        Decoded text of value.message.

        Raises:
            MissingFieldError: If the value has no message
            ResourceDecodeError: If the message is not hex-encoded text
        """
        if "message" not in self.raw_value:
            raise MissingFieldError("value.message", details={"type_name": self.type_name})
        return hex_to_ascii(self.raw_value["message"])


def hex_to_ascii(hex_str: str) -> str:
    """Decode hex-encoded text, with or without a 0x prefix."""
    if not isinstance(hex_str, str):
        raise ResourceDecodeError(f"Expected hex string, got {type(hex_str).__name__}")
    if hex_str[:2] in ("0x", "0X"):
        hex_str = hex_str[2:]
    try:
        return bytes.fromhex(hex_str).decode("utf-8")
    except ValueError as e:
        # UnicodeDecodeError is a ValueError too
        raise ResourceDecodeError(f"Cannot decode hex message: {hex_str!r}", cause=e) from e


def messages_from(resources: Iterable[Union[Dict[str, Any], Resource]]) -> List[Resource]:
    """
    Resources whose type name is MessageHolder, in their original order.

    Each match is returned as a parsed Resource rather than the input record;
    the record itself is available unchanged as Resource.record.
    """
    parsed = [Resource.from_json(entry) for entry in resources]
    return [entry for entry in parsed if entry.type_name == MESSAGE_HOLDER]


def decoded_messages(resources: Iterable[Union[Dict[str, Any], Resource]]) -> List[str]:
    """Decoded message text of every MessageHolder resource."""
    return [entry.message for entry in messages_from(resources)]
