"""
Filter service module.

Builds entry predicates from the user's subscription categories.
"""

import logging
from typing import Callable, FrozenSet, Iterable, List, Optional

from fdown.core.domain import EntryDetail, SubscriptionDetail

logger = logging.getLogger(__name__)

EntryPredicate = Callable[[EntryDetail], bool]


def accept_all(entry: EntryDetail) -> bool:
    """Predicate used when no category filter is given."""
    return True


def stream_ids_for_category(
    subscriptions: Iterable[SubscriptionDetail],
    category: str
) -> FrozenSet[str]:
    """
    Return stream ids of subscriptions carrying a category label.

    Args:
        subscriptions: The user's subscriptions.
        category: Category label, matched exactly and case-sensitively.

    Returns:
        Set of subscription stream ids.
    """
    return frozenset(
        sub.id for sub in subscriptions if sub.has_category_label(category)
    )


def category_predicate(stream_ids: FrozenSet[str]) -> EntryPredicate:
    """
    Build a predicate accepting entries from the given streams.

    Entries without an origin never match.
    """
    def predicate(entry: EntryDetail) -> bool:
        return entry.origin is not None and entry.origin.stream_id in stream_ids

    return predicate


def build_category_filter(
    subscriptions: Iterable[SubscriptionDetail],
    category: Optional[str]
) -> EntryPredicate:
    """
    Build the entry predicate for an optional category filter.

    Args:
        subscriptions: The user's subscriptions (ignored without a filter).
        category: Category label, or None to accept everything.

    Returns:
        Entry predicate.
    """
    if category is None:
        return accept_all

    stream_ids = stream_ids_for_category(subscriptions, category)
    if not stream_ids:
        logger.warning(f'⚠️ No subscriptions in category: {category}')
    else:
        logger.info(
            f'🏷️ Category {category!r} matches {len(stream_ids)} subscriptions'
        )
    return category_predicate(stream_ids)


def apply_filter(
    entries: Iterable[EntryDetail],
    predicate: EntryPredicate
) -> List[EntryDetail]:
    """Keep matching entries, preserving their order."""
    filtered = []
    for entry in entries:
        if predicate(entry):
            filtered.append(entry)
        else:
            logger.debug(f'⏭️ Skipping entry outside category: {entry.id}')
    return filtered
