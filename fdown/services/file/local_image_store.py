"""
Local image store module.

Writes downloaded images into a directory on the local filesystem.
"""

import logging
from pathlib import Path
from typing import Union

from fdown.core.exceptions import FilesystemError
from fdown.core.interfaces import IImageStore
from fdown.services.file.file_namer import resolve_destination

logger = logging.getLogger(__name__)


class LocalImageStore(IImageStore):
    """
    Local filesystem image store.

    Names files with resolve_destination and opens them with exclusive
    create, so an existing file is never overwritten.
    """

    def __init__(self, target_dir: Union[str, Path]):
        """
        Initialize the store.

        Args:
            target_dir: Directory images are written to (created on demand).
        """
        self._target_dir = Path(target_dir)

    @property
    def target_dir(self) -> Path:
        """Return the target directory."""
        return self._target_dir

    def ensure_directory(self) -> None:
        """
        Create the target directory if it does not exist.

        Raises:
            FilesystemError: If the directory cannot be created.
        """
        try:
            self._target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(
                f'Unable to create directory: {e}',
                path=str(self._target_dir)
            ) from e

    def save(self, url: str, data: bytes) -> str:
        """Write image bytes to a new file and return its path."""
        self.ensure_directory()
        path = resolve_destination(url, self._target_dir)

        try:
            f = open(path, 'xb')
        except OSError as e:
            raise FilesystemError(
                f'Unable to create image file: {e}',
                path=str(path)
            ) from e

        try:
            with f:
                f.write(data)
        except OSError as e:
            # Drop the partial file so the next run reuses the name
            path.unlink(missing_ok=True)
            raise FilesystemError(
                f'Unable to write image: {e}',
                path=str(path)
            ) from e

        logger.info(f'💾 Saved {len(data)} bytes to {path}')
        return str(path)
