"""
Domain module.

Contains the feed service's entity objects.
"""

from fdown.core.domain.entities import (
    EntryDetail,
    EntryOrigin,
    EntryVisual,
    MarkerRequest,
    StreamIdsResponse,
    SubscriptionCategory,
    SubscriptionDetail,
)

__all__ = [
    'EntryDetail',
    'EntryOrigin',
    'EntryVisual',
    'MarkerRequest',
    'StreamIdsResponse',
    'SubscriptionCategory',
    'SubscriptionDetail',
]
