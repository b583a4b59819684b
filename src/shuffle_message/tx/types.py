"""
Diem transaction types and their BCS encoding.

Field order and variant indices follow the Diem `diem_types` layout, which is
what the node's `application/vnd.bcs+signed_transaction` endpoint decodes.
"""

from __future__ import annotations
from enum import IntEnum
from typing import List, Union

from pydantic import BaseModel, Field, field_validator

from ..codec.hashes import signing_message
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter, MAX_U64
from ..runtime.address import AccountAddress
from ..runtime.errors import EncodingError


class ArgumentType(IntEnum):
    """TransactionArgument variant indices."""
    U8 = 0
    U64 = 1
    U128 = 2
    ADDRESS = 3
    U8_VECTOR = 4
    BOOL = 5


class PayloadType(IntEnum):
    """TransactionPayload variant indices."""
    WRITE_SET = 0
    SCRIPT = 1
    MODULE_BUNDLE = 2
    SCRIPT_FUNCTION = 3


class AuthenticatorType(IntEnum):
    """TransactionAuthenticator variant indices."""
    ED25519 = 0
    MULTI_ED25519 = 1


class TransactionArgument(BaseModel):
    """A single script argument."""
    type: ArgumentType
    value: Union[bool, int, bytes, AccountAddress]

    model_config = {"frozen": True}

    @classmethod
    def u8_vector(cls, value: bytes) -> TransactionArgument:
        return cls(type=ArgumentType.U8_VECTOR, value=bytes(value))

    def serialize(self, writer: BinaryWriter) -> None:
        writer.uleb128(self.type)
        if self.type == ArgumentType.U8:
            writer.u8(self.value)
        elif self.type == ArgumentType.U64:
            writer.u64(self.value)
        elif self.type == ArgumentType.U128:
            writer.u128(self.value)
        elif self.type == ArgumentType.ADDRESS:
            writer.fixed_bytes(self.value.address)
        elif self.type == ArgumentType.U8_VECTOR:
            writer.bytes(self.value)
        elif self.type == ArgumentType.BOOL:
            writer.boolean(self.value)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> TransactionArgument:
        variant = reader.uleb128()
        if variant == ArgumentType.U8:
            value = reader.u8()
        elif variant == ArgumentType.U64:
            value = reader.u64()
        elif variant == ArgumentType.U128:
            value = reader.u128()
        elif variant == ArgumentType.ADDRESS:
            value = AccountAddress(reader.fixed_bytes(AccountAddress.LENGTH))
        elif variant == ArgumentType.U8_VECTOR:
            value = reader.bytes()
        elif variant == ArgumentType.BOOL:
            value = reader.boolean()
        else:
            raise EncodingError(f"Unknown transaction argument variant: {variant}")
        return cls(type=ArgumentType(variant), value=value)


class Script(BaseModel):
    """Move script bytecode plus its arguments."""
    code: bytes
    ty_args: List[str] = Field(default_factory=list)
    args: List[TransactionArgument] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("ty_args")
    @classmethod
    def no_type_arguments(cls, v: List[str]) -> List[str]:
        if v:
            raise ValueError("Type arguments are not supported")
        return v

    def serialize(self, writer: BinaryWriter) -> None:
        writer.bytes(self.code)
        writer.uleb128(0)
        writer.sequence(self.args, lambda w, arg: arg.serialize(w))

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> Script:
        code = reader.bytes()
        if reader.uleb128() != 0:
            raise EncodingError("Scripts with type arguments are not supported")
        args = reader.sequence(TransactionArgument.deserialize)
        return cls(code=code, args=args)


class TransactionPayload(BaseModel):
    """Transaction payload; only the Script variant is produced."""
    type: PayloadType = PayloadType.SCRIPT
    script: Script

    model_config = {"frozen": True}

    def serialize(self, writer: BinaryWriter) -> None:
        writer.uleb128(self.type)
        self.script.serialize(writer)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> TransactionPayload:
        variant = reader.uleb128()
        if variant != PayloadType.SCRIPT:
            raise EncodingError(f"Unsupported transaction payload variant: {variant}")
        return cls(script=Script.deserialize(reader))


class RawTransaction(BaseModel):
    """
    An unsigned transaction.

    The sequence number must match the sender's on-chain sequence number at
    execution time; the node rejects anything else.
    """
    sender: AccountAddress
    sequence_number: int = Field(ge=0, le=MAX_U64)
    payload: TransactionPayload
    max_gas_amount: int = Field(ge=0, le=MAX_U64)
    gas_unit_price: int = Field(ge=0, le=MAX_U64)
    gas_currency_code: str
    expiration_timestamp_secs: int = Field(ge=0, le=MAX_U64)
    chain_id: int = Field(ge=0, le=0xFF)

    model_config = {"frozen": True}

    def serialize(self, writer: BinaryWriter) -> None:
        writer.fixed_bytes(self.sender.address)
        writer.u64(self.sequence_number)
        self.payload.serialize(writer)
        writer.u64(self.max_gas_amount)
        writer.u64(self.gas_unit_price)
        writer.string(self.gas_currency_code)
        writer.u64(self.expiration_timestamp_secs)
        writer.u8(self.chain_id)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> RawTransaction:
        return cls(
            sender=AccountAddress(reader.fixed_bytes(AccountAddress.LENGTH)),
            sequence_number=reader.u64(),
            payload=TransactionPayload.deserialize(reader),
            max_gas_amount=reader.u64(),
            gas_unit_price=reader.u64(),
            gas_currency_code=reader.string(),
            expiration_timestamp_secs=reader.u64(),
            chain_id=reader.u8(),
        )

    def to_bcs(self) -> bytes:
        writer = BinaryWriter()
        self.serialize(writer)
        return writer.to_bytes()

    def signing_message(self) -> bytes:
        """Bytes the sender signs: the RawTransaction salt plus BCS bytes."""
        return signing_message("RawTransaction", self.to_bcs())


class Ed25519Authenticator(BaseModel):
    """Single-key Ed25519 transaction authenticator."""
    public_key: bytes = Field(min_length=32, max_length=32)
    signature: bytes = Field(min_length=64, max_length=64)

    model_config = {"frozen": True}

    def serialize(self, writer: BinaryWriter) -> None:
        writer.uleb128(AuthenticatorType.ED25519)
        writer.bytes(self.public_key)
        writer.bytes(self.signature)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> Ed25519Authenticator:
        variant = reader.uleb128()
        if variant != AuthenticatorType.ED25519:
            raise EncodingError(f"Unsupported authenticator variant: {variant}")
        return cls(public_key=reader.bytes(), signature=reader.bytes())


class SignedTransaction(BaseModel):
    """A raw transaction with its authenticator, ready for submission."""
    raw_txn: RawTransaction
    authenticator: Ed25519Authenticator

    model_config = {"frozen": True}

    def to_bcs(self) -> bytes:
        writer = BinaryWriter()
        self.raw_txn.serialize(writer)
        self.authenticator.serialize(writer)
        return writer.to_bytes()

    @classmethod
    def from_bcs(cls, data: bytes) -> SignedTransaction:
        reader = BinaryReader(data)
        signed = cls(
            raw_txn=RawTransaction.deserialize(reader),
            authenticator=Ed25519Authenticator.deserialize(reader),
        )
        if not reader.eof:
            raise EncodingError("Trailing bytes after signed transaction")
        return signed
