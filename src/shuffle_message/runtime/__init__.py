"""Runtime helpers for the Shuffle message client"""

from .address import AccountAddress
from .errors import (
    ErrorCode,
    ShuffleError,
    ConfigurationError,
    KeyFileError,
    InvalidAddressError,
    ValidationError,
    MissingSequenceNumberError,
    EncodingError,
    NetworkError,
    SubmissionError,
    ResponseDecodeError,
    AccountNotFoundError,
    ResourceDecodeError,
    MissingFieldError,
)

__all__ = [
    "AccountAddress",
    "ErrorCode",
    "ShuffleError",
    "ConfigurationError",
    "KeyFileError",
    "InvalidAddressError",
    "ValidationError",
    "MissingSequenceNumberError",
    "EncodingError",
    "NetworkError",
    "SubmissionError",
    "ResponseDecodeError",
    "AccountNotFoundError",
    "ResourceDecodeError",
    "MissingFieldError",
]
