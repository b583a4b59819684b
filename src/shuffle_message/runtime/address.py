"""
AccountAddress Pydantic custom type for Diem account addresses.
"""

from __future__ import annotations
from typing import Any, Union
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .errors import InvalidAddressError


class AccountAddress:
    """Custom Pydantic type for 16-byte Diem account addresses."""

    LENGTH = 16

    def __init__(self, address: bytes):
        if not isinstance(address, (bytes, bytearray)):
            raise InvalidAddressError("AccountAddress must be built from bytes")
        if len(address) != self.LENGTH:
            raise InvalidAddressError(
                f"AccountAddress must be {self.LENGTH} bytes, got {len(address)}"
            )
        self.address = bytes(address)

    @classmethod
    def from_hex(cls, address: str) -> AccountAddress:
        """
        Parse a hex address, with or without a 0x prefix.

        Short addresses are left-padded with zeros, so "0x1" is the core
        framework address.

        Raises:
            InvalidAddressError: If the text is empty, not hex, or too long
        """
        if not isinstance(address, str):
            raise InvalidAddressError(f"Invalid AccountAddress: {address!r}")

        hex_str = address.strip()
        if hex_str[:2] in ("0x", "0X"):
            hex_str = hex_str[2:]
        if not hex_str:
            raise InvalidAddressError("AccountAddress cannot be empty")
        if len(hex_str) > cls.LENGTH * 2:
            raise InvalidAddressError(
                f"AccountAddress is longer than {cls.LENGTH} bytes: {address}"
            )

        try:
            return cls(bytes.fromhex(hex_str.rjust(cls.LENGTH * 2, "0")))
        except ValueError as e:
            raise InvalidAddressError(f"Invalid hex in AccountAddress: {address}", cause=e) from e

    def to_hex_literal(self) -> str:
        """Address as 0x-prefixed lowercase hex."""
        return "0x" + self.address.hex()

    def __str__(self) -> str:
        return self.address.hex()

    def __repr__(self) -> str:
        return f"AccountAddress('{self.to_hex_literal()}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AccountAddress):
            return self.address == other.address
        return False

    def __hash__(self) -> int:
        return hash(self.address)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the AccountAddress."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
        )

    @classmethod
    def _validate(cls, value: Union[str, bytes, AccountAddress]) -> AccountAddress:
        """Validate and convert the input to an AccountAddress."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value))
        raise ValueError(f"Invalid AccountAddress: {value}")
