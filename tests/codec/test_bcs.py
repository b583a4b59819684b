"""
BCS writer/reader tests.

Checks the primitive encodings against known byte vectors and the error
behavior at buffer and range boundaries.
"""

import pytest

from shuffle_message.codec import BinaryReader, BinaryWriter
from shuffle_message.runtime.errors import EncodingError


@pytest.mark.parametrize("value,expected", [
    (0, b"\x00"),
    (1, b"\x01"),
    (127, b"\x7f"),
    (128, b"\x80\x01"),
    (300, b"\xac\x02"),
    (16384, b"\x80\x80\x01"),
    (0xFFFFFFFF, b"\xff\xff\xff\xff\x0f"),
])
def test_uleb128_vectors(value, expected):
    writer = BinaryWriter()
    writer.uleb128(value)
    assert writer.to_bytes() == expected
    assert BinaryReader(expected).uleb128() == value


@pytest.mark.parametrize("data", [
    b"\xff\xff\xff\xff\x10",
    b"\xff\xff\xff\xff\x7f",
    b"\x80\x80\x80\x80\x80\x01",
])
def test_uleb128_above_u32_rejected(data):
    with pytest.raises(EncodingError):
        BinaryReader(data).uleb128()


@pytest.mark.parametrize("data", [b"\x80\x00", b"\x81\x80\x00", b"\xff\x00"])
def test_uleb128_non_canonical_rejected(data):
    with pytest.raises(EncodingError):
        BinaryReader(data).uleb128()


def test_u64_little_endian():
    writer = BinaryWriter()
    writer.u64(0x0102030405060708)
    assert writer.to_bytes() == bytes([8, 7, 6, 5, 4, 3, 2, 1])


def test_u128_little_endian():
    writer = BinaryWriter()
    writer.u128(1)
    assert writer.to_bytes() == b"\x01" + b"\x00" * 15


def test_bytes_are_length_prefixed():
    writer = BinaryWriter()
    writer.bytes(b"hello")
    assert writer.to_bytes() == b"\x05hello"


def test_string_is_utf8():
    writer = BinaryWriter()
    writer.string("XUS")
    data = writer.to_bytes()
    assert data == b"\x03XUS"
    assert BinaryReader(data).string() == "XUS"


def test_boolean():
    writer = BinaryWriter()
    writer.boolean(True)
    writer.boolean(False)
    reader = BinaryReader(writer.to_bytes())
    assert reader.boolean() is True
    assert reader.boolean() is False
    assert reader.eof


def test_sequence():
    writer = BinaryWriter()
    writer.sequence([1, 2, 3], lambda w, v: w.u8(v))
    data = writer.to_bytes()
    assert data == b"\x03\x01\x02\x03"
    assert BinaryReader(data).sequence(lambda r: r.u8()) == [1, 2, 3]


@pytest.mark.parametrize("method,value", [
    ("u8", 256),
    ("u8", -1),
    ("u64", 1 << 64),
    ("u128", 1 << 128),
    ("uleb128", 1 << 32),
])
def test_out_of_range_values_rejected(method, value):
    writer = BinaryWriter()
    with pytest.raises(EncodingError):
        getattr(writer, method)(value)


def test_bool_is_not_an_integer():
    with pytest.raises(EncodingError):
        BinaryWriter().u64(True)


def test_read_past_end():
    reader = BinaryReader(b"\x01\x02")
    with pytest.raises(EncodingError):
        reader.u64()


def test_length_prefix_past_end():
    with pytest.raises(EncodingError):
        BinaryReader(b"\x05abc").bytes()


def test_invalid_boolean_byte():
    with pytest.raises(EncodingError):
        BinaryReader(b"\x02").boolean()
