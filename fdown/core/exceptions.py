"""
Exceptions module.

Contains the exception hierarchy for the fdown application.
All custom exceptions inherit from FdownError for consistent handling,
so every component fails through one vocabulary.
"""

from typing import Any, Dict, Optional


class FdownError(Exception):
    """
    Base exception for all fdown errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
        context: Additional context information for debugging.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or 'UNKNOWN_ERROR'
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.context:
            return f'[{self.code}] {self.message} - Context: {self.context}'
        return f'[{self.code}] {self.message}'


# Configuration exceptions

class ConfigurationError(FdownError):
    """Exception raised for missing or malformed configuration."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code or 'CONFIG_ERROR', context)


class MissingConfigValueError(ConfigurationError):
    """
    Exception raised when a required configuration value is absent.

    Attributes:
        key: Name of the missing key.
    """

    def __init__(
        self,
        key: str,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        ctx['key'] = key
        super().__init__(
            f'Required config value, {key}, missing',
            'CONFIG_VALUE_MISSING',
            ctx
        )
        self.key = key


# Network exceptions

class TransportError(FdownError):
    """
    Exception raised when an HTTP request fails.

    Covers connection failures as well as non-2xx responses.

    Attributes:
        url: The requested URL.
        status_code: HTTP status code, if a response was received.
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if url:
            ctx['url'] = url
        if status_code is not None:
            ctx['status_code'] = status_code
        super().__init__(message, code or 'TRANSPORT_ERROR', ctx)
        self.url = url
        self.status_code = status_code


# Parse exceptions

class SerializationError(FdownError):
    """
    Exception raised when a response does not match the expected JSON shape.

    Attributes:
        raw_response: The raw payload that failed to decode (truncated).
    """

    def __init__(
        self,
        message: str,
        raw_response: Optional[bytes] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if raw_response:
            ctx['raw_response'] = raw_response[:200].decode('utf-8', 'replace')
        super().__init__(message, 'SERIALIZATION_ERROR', ctx)
        self.raw_response = raw_response


class BadFormatError(FdownError):
    """Exception raised when a URL or path cannot be decomposed as expected."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, 'BAD_FORMAT', context)


# File operation exceptions

class FilesystemError(FdownError):
    """
    Exception raised when creating or writing a file fails.

    Attributes:
        path: The path that could not be written.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if path:
            ctx['path'] = path
        super().__init__(message, 'FILESYSTEM_ERROR', ctx)
        self.path = path


# Entry exceptions

class MissingImageUrlError(FdownError):
    """
    Exception raised when a saved entry carries no usable image.

    Attributes:
        entry_id: Identifier of the entry without an image URL.
    """

    def __init__(self, entry_id: str):
        super().__init__(
            f'Entry has no image url: {entry_id}',
            'MISSING_IMAGE_URL',
            {'entry_id': entry_id}
        )
        self.entry_id = entry_id


# Command line exceptions

class UsageError(FdownError):
    """Exception raised for invalid command line arguments."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, 'USAGE_ERROR', context)
