"""
BCS Reader

Decodes the primitives written by BinaryWriter. Used to read back signed
transactions and script payloads.
"""

import builtins
import struct
from typing import Callable, List, TypeVar

from ..runtime.errors import EncodingError

T = TypeVar("T")


class BinaryReader:
    """
    BCS reader over an immutable byte buffer.

    Reading past the end of the buffer raises EncodingError.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if every byte has been consumed."""
        return self._off >= len(self._buf)

    def _take(self, n: int) -> builtins.bytes:
        if self._off + n > len(self._buf):
            raise EncodingError(f"Buffer overflow: attempting to read {n} bytes beyond end")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self._take(1)[0]

    def boolean(self) -> bool:
        """Read a 0/1 byte as a boolean."""
        value = self.u8()
        if value not in (0, 1):
            raise EncodingError(f"Invalid boolean byte: {value}")
        return value == 1

    def u64(self) -> int:
        """
        Read unsigned 64-bit integer in little-endian format.

        Returns:
            Unsigned 64-bit integer value
        """
        return struct.unpack("<Q", self._take(8))[0]

    def u128(self) -> int:
        """Read unsigned 128-bit integer in little-endian format."""
        return int.from_bytes(self._take(16), "little")

    def uleb128(self) -> int:
        """
        Read unsigned varint in ULEB128 format.

        Only canonical encodings of values that fit in a u32 are accepted,
        matching what BinaryWriter.uleb128 produces.

        Returns:
            Decoded unsigned integer value

        Raises:
            EncodingError: If the value exceeds u32 or is not minimally encoded
        """
        x = 0
        s = 0
        while True:
            b = self.u8()
            # The fifth byte may only carry the top four bits of a u32
            if s == 28 and b > 0x0F:
                raise EncodingError("ULEB128 value exceeds u32")
            x |= (b & 0x7F) << s
            if b < 0x80:
                if b == 0 and s > 0:
                    raise EncodingError("Non-canonical ULEB128 encoding")
                break
            s += 7
        return x

    def fixed_bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read
        """
        return self._take(n)

    def bytes(self) -> builtins.bytes:
        """Read bytes with a ULEB128 length prefix."""
        n = self.uleb128()
        return self._take(n)

    def string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        raw = self.bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError("Invalid UTF-8 string", cause=e) from e

    def sequence(self, decoder: Callable[["BinaryReader"], T]) -> List[T]:
        """Read a length-prefixed sequence, decoding each item with decoder."""
        count = self.uleb128()
        return [decoder(self) for _ in range(count)]
