"""
Entry pipeline module.

Orchestrates one archive run: fetch saved entries, filter them by
category, download each entry's image, store it and optionally unsave
the processed entries.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from fdown.core.domain import EntryDetail
from fdown.core.exceptions import FdownError, MissingImageUrlError
from fdown.core.interfaces import IImageStore, ITransport
from fdown.infrastructure.feed import FeedlyClient
from fdown.services.filter_service import (
    EntryPredicate,
    accept_all,
    apply_filter,
    build_category_filter,
)
from fdown.services.image import extract_image_url, normalize_image_url

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_COUNT = 20


@dataclass(frozen=True)
class PipelineOptions:
    """
    Options for a single run.

    Attributes:
        list_subscriptions: Only print subscriptions and stop.
        category: Only process entries from subscriptions in this category.
        unsave: Unsave processed entries once all of them succeeded.
        count: Number of saved entries to request.
        unsave_partial: On failure, still unsave the entries that succeeded
            before it (only with ``unsave``).
    """
    list_subscriptions: bool = False
    category: Optional[str] = None
    unsave: bool = False
    count: int = DEFAULT_ENTRY_COUNT
    unsave_partial: bool = False


@dataclass
class PipelineResult:
    """
    Outcome of a successful run.

    Attributes:
        processed: Entries whose image was stored, in processing order.
        saved_paths: Where each image was stored.
        unsaved: Whether the unsave mutation was sent.
        subscription_lines: Lines printed in list-subscriptions mode.
    """
    processed: List[EntryDetail] = field(default_factory=list)
    saved_paths: List[str] = field(default_factory=list)
    unsaved: bool = False
    subscription_lines: List[str] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        """Return the number of stored images."""
        return len(self.processed)


class EntryPipeline:
    """
    Saved-entry image archive pipeline.

    Entries are processed one at a time in the order the service returns
    them. The first failing entry aborts the run.
    """

    def __init__(
        self,
        feed_client: FeedlyClient,
        transport: ITransport,
        image_store: IImageStore
    ):
        """
        Initialize the pipeline.

        Args:
            feed_client: Feedly API client.
            transport: Transport used to download images (anonymous GET).
            image_store: Destination for downloaded images.
        """
        self._feed_client = feed_client
        self._transport = transport
        self._image_store = image_store

    def run(self, options: PipelineOptions) -> PipelineResult:
        """
        Execute one run.

        Args:
            options: Run options.

        Returns:
            PipelineResult describing the run.

        Raises:
            FdownError: The first failure encountered; nothing is skipped.
        """
        if options.list_subscriptions:
            return PipelineResult(subscription_lines=self.list_subscriptions())

        predicate = self.build_filter(options.category)
        entries = self.fetch_entries(predicate, options.count)
        logger.info(f'📥 {len(entries)} entries to process')

        result = PipelineResult()
        try:
            for i, entry in enumerate(entries):
                logger.info(f'Processing entry {i}.')
                result.saved_paths.append(self.process_entry(entry))
                result.processed.append(entry)
        except FdownError as e:
            logger.error(f'❌ Entry failed, aborting run: {e}')
            if options.unsave and options.unsave_partial:
                self._unsave_partial(result.processed)
            raise

        if options.unsave and result.processed:
            self._feed_client.mark_unsaved(result.processed)
            result.unsaved = True

        logger.info(f'✅ Stored {result.processed_count} images')
        return result

    def list_subscriptions(self) -> List[str]:
        """
        Print one line per subscription.

        The line is ``"<first category>: <title>"``, or just the title for
        subscriptions without a category.

        Returns:
            The printed lines.
        """
        lines = []
        for sub in self._feed_client.list_subscriptions():
            if sub.categories:
                line = f'{sub.categories[0].display_label}: {sub.display_title}'
            else:
                line = sub.display_title
            print(line)
            lines.append(line)
        return lines

    def build_filter(self, category: Optional[str]) -> EntryPredicate:
        """Build the entry predicate, fetching subscriptions if needed."""
        if category is None:
            return accept_all
        return build_category_filter(
            self._feed_client.list_subscriptions(),
            category
        )

    def fetch_entries(
        self,
        predicate: EntryPredicate,
        count: int
    ) -> List[EntryDetail]:
        """Fetch saved entries and keep those accepted by ``predicate``."""
        ids = self._feed_client.list_saved_entry_ids(count)
        entries = self._feed_client.fetch_entry_details(ids)
        return apply_filter(entries, predicate)

    def process_entry(self, entry: EntryDetail) -> str:
        """
        Download and store one entry's image.

        Returns:
            Location the image was stored at.

        Raises:
            MissingImageUrlError: If the entry has no image URL.
        """
        url = extract_image_url(entry)
        if url is None:
            raise MissingImageUrlError(entry.id)

        url = normalize_image_url(url)
        data = self.download_image(url)
        return self._image_store.save(url, data)

    def download_image(self, url: str) -> bytes:
        """Download image bytes without credentials."""
        logger.debug(f'⬇️ Downloading {url}')
        response = self._transport.get(url)
        try:
            return response.read()
        finally:
            response.close()

    def _unsave_partial(self, processed: List[EntryDetail]) -> None:
        if not processed:
            return
        logger.info(f'🔄 Unsaving {len(processed)} entries stored before the failure')
        try:
            self._feed_client.mark_unsaved(processed)
        except FdownError as e:
            # The entry failure is re-raised by the caller
            logger.error(f'❌ Partial unsave failed: {e}')
