"""
Shuffle Message Error Model

This module provides the error handling framework for the message client.
Every failure the client raises on purpose is a ShuffleError carrying an
ErrorCode, optional details, and the underlying cause.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes used by the message client."""

    # General errors (1-99)
    UNKNOWN = 1

    # Configuration errors (100-199)
    CONFIGURATION = 100
    KEY_FILE = 101
    INVALID_ADDRESS = 102

    # Encoding errors (200-299)
    ENCODING_ERROR = 200
    INVALID_JSON = 201

    # Network errors (300-399)
    NETWORK_ERROR = 300
    SUBMISSION_REJECTED = 301

    # Transaction errors (400-499)
    INVALID_TRANSACTION = 400
    MISSING_SEQUENCE_NUMBER = 401
    ACCOUNT_NOT_FOUND = 402

    # Resource errors (500-599)
    RESOURCE_DECODE = 500
    MISSING_FIELD = 501


class ShuffleError(Exception):
    """
    Base class for all message client errors.

    Provides structured error information so callers can branch on the code
    instead of parsing messages.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        """
        Initialize a message client error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ConfigurationError(ShuffleError):
    """Local account state (address or key file) is missing or unusable."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIGURATION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class KeyFileError(ConfigurationError):
    """Private key file missing, unreadable, or too short."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.KEY_FILE, details, cause)


class InvalidAddressError(ShuffleError):
    """Account address text could not be parsed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.INVALID_ADDRESS, details, cause)


class ValidationError(ShuffleError):
    """Transaction field validation errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_TRANSACTION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class MissingSequenceNumberError(ValidationError):
    """set_message was called without a sequence number; nothing was sent."""

    def __init__(self, message: str = "Must pass in parameters: message, sequence_number",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.MISSING_SEQUENCE_NUMBER, details, cause)


class EncodingError(ShuffleError):
    """BCS encoding or decoding errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.ENCODING_ERROR, details, cause)


class NetworkError(ShuffleError):
    """Network-related errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NETWORK_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class SubmissionError(NetworkError):
    """The node answered with an HTTP error status."""

    def __init__(self, message: str, status_code: int, body: Any = None,
                 cause: Optional[BaseException] = None):
        details = {"status_code": status_code}
        if body is not None:
            details["body"] = body
        super().__init__(message, ErrorCode.SUBMISSION_REJECTED, details, cause)
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(NetworkError):
    """The node answered with a body that is not JSON."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.INVALID_JSON, details, cause)


class AccountNotFoundError(ShuffleError):
    """Account does not exist on chain."""

    def __init__(self, message: str = "Account not found",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.ACCOUNT_NOT_FOUND, details, cause)


class ResourceDecodeError(ShuffleError):
    """A resource record has the right shape but undecodable content."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.RESOURCE_DECODE,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class MissingFieldError(ResourceDecodeError):
    """A resource record is missing an expected field."""

    def __init__(self, field: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(f"Resource record is missing field '{field}'",
                         ErrorCode.MISSING_FIELD, details, cause)
        self.field = field
