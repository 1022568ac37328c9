"""
Dropbox uploader module.

Provides an IImageStore that uploads images to Dropbox instead of
writing them to the local filesystem.
"""

import json
import logging
from typing import Optional

import requests

from fdown.core.exceptions import TransportError
from fdown.core.interfaces import IImageStore
from fdown.services.file.file_namer import filename_from_url

logger = logging.getLogger(__name__)


class DropboxUploader(IImageStore):
    """
    Dropbox files/upload adapter.

    Uploads in 'add' mode with autorename, so Dropbox resolves name
    collisions server-side.
    """

    UPLOAD_URL = 'https://content.dropboxapi.com/2/files/upload'
    DEFAULT_TIMEOUT = 60

    def __init__(
        self,
        token: str,
        folder: str = '/fdown',
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the uploader.

        Args:
            token: Dropbox OAuth2 access token.
            folder: Destination folder inside the Dropbox.
            timeout: Upload timeout in seconds.
            session: Session to reuse, a new one is created if omitted.
        """
        self._token = token
        self._folder = '/' + folder.strip('/') if folder.strip('/') else ''
        self._timeout = timeout
        self._session = session or requests.Session()

    def _api_arg(self, path: str) -> str:
        """Return the Dropbox-API-Arg header value for ``path``."""
        return json.dumps({
            'path': path,
            'mode': 'add',
            'autorename': True,
            'mute': False,
        })

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def save(self, url: str, data: bytes) -> str:
        """Upload image bytes and return the Dropbox path."""
        path = f'{self._folder}/{filename_from_url(url)}'
        headers = {
            'Authorization': f'Bearer {self._token}',
            'Content-Type': 'application/octet-stream',
            'Dropbox-API-Arg': self._api_arg(path),
        }

        try:
            response = self._session.post(
                self.UPLOAD_URL,
                data=data,
                headers=headers,
                timeout=self._timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise TransportError(
                f'Dropbox upload rejected: HTTP {status_code}',
                url=self.UPLOAD_URL,
                status_code=status_code,
                context={'path': path}
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f'Dropbox upload failed: {e}',
                url=self.UPLOAD_URL,
                context={'path': path}
            ) from e

        logger.info(f'☁️ Uploaded to Dropbox: {path}')
        return path
