"""
Test fixtures:
- A temporary Shuffle home with a tagged key file and an address file
- Fake compiled set_message bytecode
- A deterministic Ed25519 key matching the key file
"""
import logging
import sys
import pathlib

import pytest

# Ensure tests directory is in Python path for the helpers package
TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import KEY_SEED, SCRIPT_CODE, SENDER_ADDRESS, write_key_file  # noqa: E402

from shuffle_message.config import ShuffleConfig  # noqa: E402
from shuffle_message.crypto.ed25519 import Ed25519PrivateKey  # noqa: E402


@pytest.fixture
def shuffle_home(tmp_path):
    """Shuffle home with accounts/latest/{dev.key,address}."""
    home = tmp_path / "shuffle"
    latest = home / "accounts" / "latest"
    write_key_file(latest / "dev.key")
    (latest / "address").write_text(SENDER_ADDRESS)
    return home


@pytest.fixture
def script_file(tmp_path):
    path = tmp_path / "set_message.mv"
    path.write_bytes(SCRIPT_CODE)
    return path


@pytest.fixture
def config(shuffle_home, script_file):
    return ShuffleConfig(
        shuffle_dir=str(shuffle_home),
        node_url="http://127.0.0.1:8081",
        set_message_script=str(script_file),
    )


@pytest.fixture
def private_key():
    """Ed25519 key whose seed is stored in the fixture key file."""
    return Ed25519PrivateKey(KEY_SEED)


@pytest.fixture
def restore_log_levels():
    """Reset the client module loggers after a test turns on debug."""
    names = ["shuffle_message.api_client", "shuffle_message.message"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
