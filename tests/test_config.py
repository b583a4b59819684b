"""Tests for ShuffleConfig environment resolution"""

import os
from pathlib import Path

import pytest

from helpers import SENDER_ADDRESS

from shuffle_message.config import (
    DEFAULT_NODE_URL,
    SET_MESSAGE_SCRIPT_PATH,
    UNKNOWN_SHUFFLE_DIR,
    ShuffleConfig,
)
from shuffle_message.runtime.errors import ConfigurationError


def test_unset_shuffle_home_is_unknown():
    config = ShuffleConfig.from_env({})

    assert config.shuffle_dir == UNKNOWN_SHUFFLE_DIR == "unknown"
    assert config.node_url == DEFAULT_NODE_URL == "http://127.0.0.1:8081"
    assert config.set_message_script is None


def test_unknown_home_fails_to_load():
    config = ShuffleConfig.from_env({})

    with pytest.raises(ConfigurationError) as exc_info:
        config.load()
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_paths_derived_from_home(shuffle_home):
    config = ShuffleConfig.from_env({"SHUFFLE_HOME": str(shuffle_home)})

    assert config.key_path == Path(shuffle_home) / "accounts" / "latest" / "dev.key"
    assert config.address_path == Path(shuffle_home) / "accounts" / "latest" / "address"


def test_sender_address(shuffle_home):
    config = ShuffleConfig.from_env({"SHUFFLE_HOME": str(shuffle_home)}).load()

    assert config.sender_address == SENDER_ADDRESS
    assert config.full_sender_address == "0x" + SENDER_ADDRESS
    assert config.sender().to_hex_literal() == "0x" + SENDER_ADDRESS


def test_address_is_read_once(shuffle_home):
    config = ShuffleConfig(shuffle_dir=str(shuffle_home)).load()
    (shuffle_home / "accounts" / "latest" / "address").write_text("ff" * 16)

    assert config.sender_address == SENDER_ADDRESS


def test_address_whitespace_stripped(tmp_path):
    latest = tmp_path / "accounts" / "latest"
    latest.mkdir(parents=True)
    (latest / "address").write_text(SENDER_ADDRESS + "\n")

    assert ShuffleConfig(shuffle_dir=str(tmp_path)).full_sender_address == "0x" + SENDER_ADDRESS


def test_env_overrides():
    config = ShuffleConfig.from_env({
        "SHUFFLE_HOME": "/tmp/shuffle",
        "SHUFFLE_NODE_URL": "http://node:9000",
        "SHUFFLE_SET_MESSAGE_SCRIPT": "/tmp/set_message.mv",
    })

    assert config.shuffle_dir == "/tmp/shuffle"
    assert config.node_url == "http://node:9000"
    assert config.set_message_script == "/tmp/set_message.mv"


def test_script_path_from_project_path():
    config = ShuffleConfig.from_env({"PROJECT_PATH": "/work/project"})
    assert config.set_message_script == os.path.join("/work/project", SET_MESSAGE_SCRIPT_PATH)


def test_keyword_overrides_win():
    config = ShuffleConfig.from_env({"SHUFFLE_NODE_URL": "http://node:9000"}, node_url="http://other:1")
    assert config.node_url == "http://other:1"


def test_from_env_reads_os_environ(monkeypatch, shuffle_home):
    monkeypatch.setenv("SHUFFLE_HOME", str(shuffle_home))
    monkeypatch.delenv("SHUFFLE_NODE_URL", raising=False)

    config = ShuffleConfig.from_env()
    assert config.shuffle_dir == str(shuffle_home)
    assert config.node_url == DEFAULT_NODE_URL
