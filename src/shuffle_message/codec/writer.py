"""
BCS Writer

Implements Binary Canonical Serialization primitives used by Diem
transactions: little-endian fixed-width integers, ULEB128 lengths and
variant tags, and length-prefixed byte strings.
"""

import builtins
import struct
from typing import Callable, List, Sequence, TypeVar

from ..runtime.errors import EncodingError

T = TypeVar("T")

MAX_U8 = 0xFF
MAX_U64 = 0xFFFFFFFFFFFFFFFF
MAX_U128 = (1 << 128) - 1


class BinaryWriter:
    """
    BCS writer accumulating bytes into an internal buffer.

    Integer writers reject out-of-range values instead of masking them, so a
    bad sequence number or gas amount never silently wraps.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def _check_range(self, name: str, v: int, maximum: int) -> None:
        if not isinstance(v, int) or isinstance(v, bool) or v < 0 or v > maximum:
            raise EncodingError(f"{name} value out of range: {v!r}")

    def u8(self, v: int) -> None:
        """Write unsigned 8-bit integer."""
        self._check_range("u8", v, MAX_U8)
        self._bb.append(v)

    def boolean(self, v: bool) -> None:
        """Write a boolean as a single 0/1 byte."""
        self._bb.append(1 if v else 0)

    def u64(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        self._check_range("u64", v, MAX_U64)
        self._bb.extend(struct.pack("<Q", v))

    def u128(self, v: int) -> None:
        """Write unsigned 128-bit integer in little-endian format."""
        self._check_range("u128", v, MAX_U128)
        self._bb.extend(v.to_bytes(16, "little"))

    def fixed_bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Used for fixed-size values such as account addresses.
        """
        self._bb.extend(v)

    def bytes(self, v: bytes) -> None:
        """
        Write bytes with a ULEB128 length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.uleb128(len(v))
        self.fixed_bytes(v)

    def string(self, s: str) -> None:
        """Write a UTF-8 string with length prefix."""
        self.bytes(s.encode("utf-8"))

    def uleb128(self, v: int) -> None:
        """
        Write unsigned varint in ULEB128 format.

        BCS uses ULEB128 for sequence lengths and enum variant indices, and
        caps them at u32.

        Args:
            v: Unsigned integer value to encode
        """
        self._check_range("uleb128", v, 0xFFFFFFFF)
        x = v
        while x >= 0x80:
            self._bb.append((x & 0x7F) | 0x80)
            x >>= 7
        self._bb.append(x)

    def sequence(self, values: Sequence[T], encoder: Callable[["BinaryWriter", T], None]) -> None:
        """Write a length-prefixed sequence, encoding each item with encoder."""
        self.uleb128(len(values))
        for value in values:
            encoder(self, value)

    def to_bytes(self) -> builtins.bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
