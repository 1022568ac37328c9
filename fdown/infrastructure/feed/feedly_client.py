"""
Feedly client module.

Wraps an ITransport with Feedly v3 URL construction, OAuth header
formatting and JSON encoding/decoding for each remote operation.
"""

import logging
from typing import BinaryIO, List, Sequence, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from fdown.core.domain import (
    EntryDetail,
    MarkerRequest,
    StreamIdsResponse,
    SubscriptionDetail,
)
from fdown.core.exceptions import SerializationError
from fdown.core.interfaces import ITransport

logger = logging.getLogger(__name__)

T = TypeVar('T')

_ENTRY_LIST = TypeAdapter(List[EntryDetail])
_SUBSCRIPTION_LIST = TypeAdapter(List[SubscriptionDetail])
_ID_LIST = TypeAdapter(List[str])


class FeedlyClient:
    """
    Feedly API v3 client.

    Holds only immutable credentials; every call goes through the injected
    transport. Transport failures propagate as TransportError, bodies that
    are not the expected JSON raise SerializationError.
    """

    BASE_URL = 'http://cloud.feedly.com/v3'

    def __init__(
        self,
        userid: str,
        token: str,
        transport: ITransport,
        base_url: str = BASE_URL
    ):
        """
        Initialize the client.

        Args:
            userid: Feedly user id.
            token: OAuth access token.
            transport: HTTP transport used for every request.
            base_url: API root, without trailing slash.
        """
        self._userid = userid
        self._token = token
        self._transport = transport
        self._base_url = base_url.rstrip('/')

    @property
    def saved_stream_id(self) -> str:
        """Return the synthetic stream holding the user's saved entries."""
        return f'user/{self._userid}/tag/global.saved'

    @property
    def auth_header(self) -> str:
        """Return the Authorization header value."""
        return f'OAuth {self._token}'

    def list_saved_entry_ids(self, count: int) -> List[str]:
        """
        List ids of saved entries.

        Only the first page is requested. Ids beyond ``count`` in the
        response are dropped.

        Args:
            count: Maximum number of ids.

        Returns:
            Entry ids, newest first.
        """
        # The stream id is sent unescaped, the service accepts it as-is
        url = (
            f'{self._base_url}/streams/ids?streamId={self.saved_stream_id}'
            f'&count={count}'
        )
        response = self._transport.get(url, self.auth_header)
        ids = self._decode(response, StreamIdsResponse).ids[:count]
        logger.info(f'🔍 Found {len(ids)} saved entries')
        return ids

    def fetch_entry_details(self, ids: Sequence[str]) -> List[EntryDetail]:
        """
        Fetch full details for a batch of entries.

        The batch endpoint is public, so no credentials are sent.

        Args:
            ids: Entry ids; order is preserved in the request body.

        Returns:
            Entry details in the order the service returns them.
        """
        url = f'{self._base_url}/entries/.mget'
        body = _ID_LIST.dump_json(list(ids))

        response = self._transport.post(url, None, body)
        entries = self._decode_list(response, _ENTRY_LIST)
        logger.debug(f'📋 Fetched details for {len(entries)} entries')
        return entries

    def list_subscriptions(self) -> List[SubscriptionDetail]:
        """Return the user's subscriptions."""
        url = f'{self._base_url}/subscriptions'
        response = self._transport.get(url, self.auth_header)
        subscriptions = self._decode_list(response, _SUBSCRIPTION_LIST)
        logger.debug(f'📋 Fetched {len(subscriptions)} subscriptions')
        return subscriptions

    def mark_unsaved(self, entries: Sequence[EntryDetail]) -> None:
        """
        Remove the saved mark from entries.

        Args:
            entries: Entries to unsave, sent in the given order.
        """
        if not entries:
            logger.debug('⏭️ No entries to unsave')
            return

        url = f'{self._base_url}/markers'
        marker = MarkerRequest(
            action='markAsUnsaved',
            type='entries',
            entry_ids=[entry.id for entry in entries]
        )
        body = marker.model_dump_json(by_alias=True).encode('utf-8')

        self._transport.post(url, self.auth_header, body)
        logger.info(f'✅ Unsaved {len(entries)} entries')

    @staticmethod
    def _read(response: BinaryIO) -> bytes:
        try:
            return response.read()
        finally:
            response.close()

    def _decode(self, response: BinaryIO, model: Type[T]) -> T:
        raw = self._read(response)
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise SerializationError(
                f'Unexpected {model.__name__} payload: {e.error_count()} error(s)',
                raw_response=raw
            ) from e

    def _decode_list(self, response: BinaryIO, adapter: TypeAdapter) -> list:
        raw = self._read(response)
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise SerializationError(
                f'Unexpected list payload: {e}',
                raw_response=raw
            ) from e
