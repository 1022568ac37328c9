"""
HTTP transport module.

Provides the networked ITransport implementation backed by requests.
"""

import io
import logging
from typing import BinaryIO, Dict, Optional

import requests

from fdown.core.exceptions import TransportError
from fdown.core.interfaces import ITransport

logger = logging.getLogger(__name__)


class RequestsTransport(ITransport):
    """
    requests-based HTTP transport.

    Only responsible for HTTP communication: one request per call, no
    retries, the whole body buffered before returning.
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds.
            session: Session to reuse, a new one is created if omitted.
        """
        self._timeout = timeout
        self._session = session or requests.Session()

    def get(self, url: str, auth: Optional[str] = None) -> BinaryIO:
        """Issue a GET request and return the body as a stream."""
        return self._send('GET', url, auth)

    def post(
        self,
        url: str,
        auth: Optional[str] = None,
        body: bytes = b''
    ) -> BinaryIO:
        """Issue a POST request and return the body as a stream."""
        return self._send('POST', url, auth, body)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def _send(
        self,
        method: str,
        url: str,
        auth: Optional[str],
        body: Optional[bytes] = None
    ) -> BinaryIO:
        headers: Dict[str, str] = {}
        if auth is not None:
            headers['Authorization'] = auth

        logger.debug(f'🌐 {method} {url} (auth: {auth is not None})')

        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=self._timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise TransportError(
                f'HTTP {status_code} for {method} request',
                url=url,
                status_code=status_code
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f'{method} request failed: {e}',
                url=url
            ) from e

        return io.BytesIO(response.content)
