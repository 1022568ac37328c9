"""
Core layer module.

Contains domain models, interfaces, configuration and exception definitions.
"""

from fdown.core.exceptions import (
    BadFormatError,
    ConfigurationError,
    FdownError,
    FilesystemError,
    MissingConfigValueError,
    MissingImageUrlError,
    SerializationError,
    TransportError,
    UsageError,
)

__all__ = [
    # Exceptions
    'FdownError',
    'ConfigurationError',
    'MissingConfigValueError',
    'TransportError',
    'SerializationError',
    'FilesystemError',
    'BadFormatError',
    'MissingImageUrlError',
    'UsageError',
]
