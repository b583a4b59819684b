"""
Configuration for the Shuffle message client.

Resolves the local account state directory and node endpoint from the
environment. Construction does no I/O; the sender address is read from disk
the first time it is needed (or eagerly via load()).
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .runtime.address import AccountAddress
from .runtime.errors import ConfigurationError

SHUFFLE_HOME_ENV = "SHUFFLE_HOME"
NODE_URL_ENV = "SHUFFLE_NODE_URL"
SET_MESSAGE_SCRIPT_ENV = "SHUFFLE_SET_MESSAGE_SCRIPT"
PROJECT_PATH_ENV = "PROJECT_PATH"

# Used when SHUFFLE_HOME is unset; every path under it fails to resolve
UNKNOWN_SHUFFLE_DIR = "unknown"
DEFAULT_NODE_URL = "http://127.0.0.1:8081"

LATEST_KEY_PATH = "accounts/latest/dev.key"
LATEST_ADDRESS_PATH = "accounts/latest/address"
SET_MESSAGE_SCRIPT_PATH = "main/build/Message/bytecode_scripts/set_message.mv"


@dataclass
class ShuffleConfig:
    """Configuration for the message client."""

    shuffle_dir: str = UNKNOWN_SHUFFLE_DIR
    node_url: str = DEFAULT_NODE_URL
    set_message_script: Optional[str] = None
    timeout: Optional[float] = None
    debug: bool = False
    _sender_address: Optional[str] = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> ShuffleConfig:
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            overrides: Field values that take precedence over the environment
        """
        env = os.environ if environ is None else environ
        script = env.get(SET_MESSAGE_SCRIPT_ENV)
        if not script and env.get(PROJECT_PATH_ENV):
            script = os.path.join(env[PROJECT_PATH_ENV], SET_MESSAGE_SCRIPT_PATH)

        values = {
            "shuffle_dir": env.get(SHUFFLE_HOME_ENV) or UNKNOWN_SHUFFLE_DIR,
            "node_url": env.get(NODE_URL_ENV) or DEFAULT_NODE_URL,
            "set_message_script": script,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def key_path(self) -> Path:
        return Path(self.shuffle_dir) / LATEST_KEY_PATH

    @property
    def address_path(self) -> Path:
        return Path(self.shuffle_dir) / LATEST_ADDRESS_PATH

    @property
    def sender_address(self) -> str:
        """
        Account address from the address file, without 0x prefix.

        Read once and cached on this configuration.

        Raises:
            ConfigurationError: If the address file is missing or unreadable
        """
        if self._sender_address is None:
            try:
                text = self.address_path.read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(
                    f"Cannot read account address file: {self.address_path}",
                    details={"path": str(self.address_path)},
                    cause=e,
                ) from e
            self._sender_address = text.strip()
        return self._sender_address

    @property
    def full_sender_address(self) -> str:
        return "0x" + self.sender_address

    def sender(self) -> AccountAddress:
        """Parsed sender address."""
        return AccountAddress.from_hex(self.full_sender_address)

    def load(self) -> ShuffleConfig:
        """Read the sender address now so a bad setup fails at startup."""
        self.sender()
        return self
