"""
Infrastructure layer module.

Provides external service integrations:
- HTTP transport (requests)
- Feedly API client
- Dropbox upload
"""

from fdown.infrastructure.feed import FeedlyClient
from fdown.infrastructure.http import RequestsTransport
from fdown.infrastructure.storage import DropboxUploader

__all__ = [
    'DropboxUploader',
    'FeedlyClient',
    'RequestsTransport',
]
