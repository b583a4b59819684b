"""
Script encoders for the Message module.

The compiled `set_message` script bytecode is produced by the Move build of
the project and read from disk; this module only wraps it with arguments.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from ..runtime.errors import ConfigurationError, EncodingError
from .types import ArgumentType, Script, TransactionArgument

logger = logging.getLogger(__name__)


def load_script_code(path: Union[str, Path]) -> bytes:
    """
    Read compiled Move script bytecode.

    Raises:
        ConfigurationError: If the file does not exist or cannot be read
    """
    path = Path(path)
    try:
        code = path.read_bytes()
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read compiled script: {path}",
            details={"path": str(path)},
            cause=e,
        ) from e
    logger.debug("Loaded %d bytes of script code from %s", len(code), path)
    return code


def encode_set_message_script(message: bytes, code: bytes) -> Script:
    """Build the set_message script call with message as its only argument."""
    return Script(code=code, args=[TransactionArgument.u8_vector(message)])


def decode_set_message_script(script: Script) -> bytes:
    """
    Recover the message bytes from a set_message script.

    Raises:
        EncodingError: If the script does not carry exactly one vector<u8>
    """
    if len(script.args) != 1 or script.args[0].type != ArgumentType.U8_VECTOR:
        raise EncodingError("Script is not a set_message call")
    return script.args[0].value
