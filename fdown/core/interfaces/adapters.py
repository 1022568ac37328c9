"""
Adapter interfaces module.

Contains abstract base classes defining contracts for external service adapters.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class ITransport(ABC):
    """
    HTTP transport interface.

    Defines the minimal HTTP capability the feed client and the pipeline
    rely on, so a networked client can be swapped for an in-memory one.
    Each call issues exactly one request and never retries.
    """

    @abstractmethod
    def get(self, url: str, auth: Optional[str] = None) -> BinaryIO:
        """
        Issue a GET request.

        Args:
            url: Absolute URL to fetch.
            auth: Authorization header value, None for an anonymous request.

        Returns:
            Readable binary stream over the response body.

        Raises:
            TransportError: On connection failure or a non-2xx response.
        """
        pass

    @abstractmethod
    def post(
        self,
        url: str,
        auth: Optional[str] = None,
        body: bytes = b''
    ) -> BinaryIO:
        """
        Issue a POST request.

        Args:
            url: Absolute URL to post to.
            auth: Authorization header value, None for an anonymous request.
            body: Raw request body.

        Returns:
            Readable binary stream over the response body.

        Raises:
            TransportError: On connection failure or a non-2xx response.
        """
        pass

    def close(self) -> None:
        """Release any held connections."""
        pass


class IImageStore(ABC):
    """
    Image store interface.

    Defines where downloaded image bytes end up.
    """

    @abstractmethod
    def save(self, url: str, data: bytes) -> str:
        """
        Persist image bytes downloaded from ``url``.

        Args:
            url: Source URL, used to derive the file name.
            data: Image bytes.

        Returns:
            Location the image was written to.

        Raises:
            BadFormatError: If no file name can be derived from the URL.
            FilesystemError: If the local write fails.
            TransportError: If a remote upload fails.
        """
        pass

    def close(self) -> None:
        """Release any held connections."""
        pass
