"""
Message client.

Builds, signs, and submits set_message transactions for the account in the
local Shuffle home, and reads MessageHolder resources back.

Example:
    ```python
    from shuffle_message import MessageClient, ShuffleConfig

    config = ShuffleConfig.from_env().load()
    with MessageClient(config) as client:
        seq = client.sequence_number()
        client.set_message("hello blockchain", seq)
        print(client.messages())
    ```
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Tuple

from .api_client import DevApiClient
from .config import ShuffleConfig
from .resources import decoded_messages
from .runtime.errors import ConfigurationError, MissingSequenceNumberError
from .signers.key_file import KeyFileSigner
from .tx.builder import set_message_raw_transaction, set_message_transaction_payload
from .tx.stdlib import load_script_code
from .tx.types import RawTransaction, TransactionPayload

logger = logging.getLogger(__name__)

USAGE_HINT = (
    "Must pass in parameters: message, sequence_number. "
    "Try MessageClient.sequence_number()"
)


class MessageClient:
    """
    Client for the Message module, bound to one ShuffleConfig.

    The sender address is read once through the configuration; the private
    key is re-read from disk on every signing call.
    """

    def __init__(
        self,
        config: ShuffleConfig,
        api: Optional[DevApiClient] = None,
        signer: Optional[KeyFileSigner] = None,
        script_code: Optional[bytes] = None,
    ):
        """
        Args:
            config: Local account and node configuration
            api: Dev API client; defaults to one for config.node_url. An
                injected client is not closed by close().
            signer: Transaction signer; defaults to the config's key file
            script_code: Compiled set_message bytecode; defaults to reading
                config.set_message_script on first use
        """
        self.config = config
        self._owns_api = api is None
        self.api = api or DevApiClient(config.node_url, timeout=config.timeout, debug=config.debug)
        self.signer = signer or KeyFileSigner(config.key_path)
        self._script_code = script_code

        # Sets the shared module logger; the level outlives this client
        if config.debug:
            logger.setLevel(logging.DEBUG)

    @property
    def script_code(self) -> bytes:
        if self._script_code is None:
            if not self.config.set_message_script:
                raise ConfigurationError(
                    "No compiled set_message script configured; "
                    "set SHUFFLE_SET_MESSAGE_SCRIPT or PROJECT_PATH"
                )
            self._script_code = load_script_code(self.config.set_message_script)
        return self._script_code

    def set_message_transaction_payload(self, message: str) -> TransactionPayload:
        return set_message_transaction_payload(message, self.script_code)

    def set_message_raw_transaction(self, sender_str: str, message: str,
                                    sequence_number: int) -> RawTransaction:
        return set_message_raw_transaction(sender_str, message, sequence_number, self.script_code)

    def new_raw_transaction_and_signing_msg(self, message: str,
                                            sequence_number: int) -> Tuple[RawTransaction, bytes]:
        raw_txn = self.set_message_raw_transaction(
            self.config.full_sender_address, message, sequence_number,
        )
        return raw_txn, raw_txn.signing_message()

    def new_signed_transaction(self, raw_txn: RawTransaction, signing_msg: bytes) -> bytes:
        """Wire bytes of the signed transaction."""
        return self.signer.sign_transaction(raw_txn, signing_msg)

    def set_message(self, message: str, sequence_number: Optional[int] = None) -> Any:
        """
        Store message in the sender's MessageHolder.

        Args:
            message: Text to store
            sequence_number: Sender's current sequence number

        Returns:
            The node's JSON response to the submission

        Raises:
            MissingSequenceNumberError: If sequence_number is None; nothing is sent
            KeyFileError: If the private key cannot be read; nothing is sent
            NetworkError: If the submission fails
        """
        if sequence_number is None:
            logger.warning(USAGE_HINT)
            raise MissingSequenceNumberError(USAGE_HINT)

        raw_txn, signing_msg = self.new_raw_transaction_and_signing_msg(message, sequence_number)
        signed_txn = self.new_signed_transaction(raw_txn, signing_msg)
        logger.info("Submitting set_message from %s at sequence %d",
                    self.config.full_sender_address, sequence_number)
        return self.api.post_transactions(signed_txn)

    def sequence_number(self) -> int:
        """The sender's current on-chain sequence number."""
        return self.api.get_account_sequence_number(self.config.full_sender_address)

    def messages(self, address: Optional[str] = None) -> List[str]:
        """Decoded messages held by address (the sender by default)."""
        address = address or self.config.full_sender_address
        return decoded_messages(self.api.get_account_resources(address))

    def close(self) -> None:
        """Close the dev API client if this client created it."""
        if self._owns_api:
            self.api.close()

    def __enter__(self) -> MessageClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
