"""
Entities module.

Contains the feed service's response objects. Every field other than the
identifiers is best-effort: the service omits them freely, so consumers
must handle absence explicitly.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _FeedModel(BaseModel):
    """Immutable base for decoded feed objects; unknown keys are ignored."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )


class EntryVisual(_FeedModel):
    """
    Visual (lead image) attached to an entry.

    Attributes:
        url: Image URL, may be missing or the literal 'none'.
        content_type: MIME type reported by the service.
    """
    url: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias='contentType')


class EntryOrigin(_FeedModel):
    """
    Stream an entry came from.

    Attributes:
        stream_id: Subscription stream identifier (e.g. 'feed/http://...').
        title: Subscription title.
    """
    stream_id: str = Field(alias='streamId')
    title: Optional[str] = None


class EntryDetail(_FeedModel):
    """
    Full detail of a saved entry.

    Attributes:
        id: Unique entry identifier, always present.
        fingerprint: Content fingerprint.
        visual: Lead image information.
        origin: Originating stream.
    """
    id: str
    fingerprint: Optional[str] = None
    visual: Optional[EntryVisual] = None
    origin: Optional[EntryOrigin] = None


class SubscriptionCategory(_FeedModel):
    """A user-defined category a subscription belongs to."""
    id: str
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        """Return the label, falling back to the category id."""
        return self.label or self.id


class SubscriptionDetail(_FeedModel):
    """
    A followed source.

    Attributes:
        id: Stream identifier of the subscription.
        title: Subscription title.
        website: Website URL of the source.
        categories: Categories, in the order the service returns them.
    """
    id: str
    title: Optional[str] = None
    website: Optional[str] = None
    categories: List[SubscriptionCategory] = Field(default_factory=list)

    @property
    def display_title(self) -> str:
        """Return the title, falling back to the stream id."""
        return self.title or self.id

    def has_category_label(self, label: str) -> bool:
        """Check whether any category label equals ``label`` exactly."""
        return any(cat.label == label for cat in self.categories)


class StreamIdsResponse(_FeedModel):
    """Response of the stream ids endpoint."""
    ids: List[str]
    continuation: Optional[str] = None


class MarkerRequest(_FeedModel):
    """Body of a markers mutation."""
    action: str
    type: str
    entry_ids: List[str] = Field(alias='entryIds')
