"""
Infrastructure feed module.

Contains the Feedly API client.
"""

from fdown.infrastructure.feed.feedly_client import FeedlyClient

__all__ = [
    'FeedlyClient',
]
