"""Tests for MessageHolder resource filtering and decoding"""

import pytest

from shuffle_message.resources import (
    Resource,
    decoded_messages,
    hex_to_ascii,
    messages_from,
)
from shuffle_message.runtime.errors import MissingFieldError, ResourceDecodeError

HELLO = {"type": {"name": "MessageHolder"}, "value": {"message": "68656c6c6f"}}
OTHER = {"type": {"name": "Other"}}


def test_messages_from_keeps_message_holders():
    result = messages_from([HELLO, OTHER])

    assert len(result) == 1
    assert result[0].type_name == "MessageHolder"
    assert result[0].raw_value == {"message": "68656c6c6f"}
    assert result[0].record == HELLO


def test_decoded_messages():
    assert decoded_messages([HELLO, OTHER]) == ["hello"]


def test_order_preserved_without_dedup():
    world = {"type": {"name": "MessageHolder"}, "value": {"message": "776f726c64"}}
    assert decoded_messages([world, OTHER, HELLO, world]) == ["world", "hello", "world"]


def test_empty_input():
    assert messages_from([]) == []
    assert decoded_messages([]) == []


def test_accepts_parsed_resources():
    parsed = Resource.from_json(HELLO)
    assert decoded_messages([parsed]) == ["hello"]


def test_full_struct_tag():
    record = {
        "type": {"address": "0x24163afcc6e33b0a9473852e18327fa9", "module": "Message",
                 "name": "MessageHolder", "generic_type_params": []},
        "value": {"message": "0x6869"},
    }
    assert decoded_messages([record]) == ["hi"]


@pytest.mark.parametrize("record", [
    {},
    {"type": "0x1::DiemAccount::DiemAccount"},
    {"type": {"module": "Message"}},
])
def test_missing_type_name(record):
    with pytest.raises(MissingFieldError) as exc_info:
        messages_from([record])
    assert exc_info.value.field == "type.name"


def test_message_holder_without_message():
    with pytest.raises(MissingFieldError) as exc_info:
        decoded_messages([{"type": {"name": "MessageHolder"}, "value": {}}])
    assert exc_info.value.field == "value.message"


def test_non_object_record():
    with pytest.raises(ResourceDecodeError):
        messages_from(["MessageHolder"])


@pytest.mark.parametrize("hex_str", ["zz", "abc", "ff"])
def test_bad_hex_message(hex_str):
    with pytest.raises(ResourceDecodeError):
        hex_to_ascii(hex_str)


def test_hex_to_ascii():
    assert hex_to_ascii("68656c6c6f") == "hello"
    assert hex_to_ascii("0x68656c6c6f") == "hello"
    assert hex_to_ascii("") == ""
