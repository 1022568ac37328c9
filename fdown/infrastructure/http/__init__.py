"""
Infrastructure HTTP module.

Contains the networked transport implementation.
"""

from fdown.infrastructure.http.requests_transport import RequestsTransport

__all__ = [
    'RequestsTransport',
]
