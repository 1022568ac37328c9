"""
File namer module.

Derives local file paths from image URLs without ever overwriting an
existing file.
"""

import logging
from pathlib import Path
from typing import Union

from fdown.core.exceptions import BadFormatError

logger = logging.getLogger(__name__)

# Upper bound on '_(n)' probes before giving up
MAX_DISAMBIGUATOR = 100000


def filename_from_url(url: str) -> str:
    """
    Return the final path segment of a URL.

    Raises:
        BadFormatError: If the URL has no '/' or ends with one.
    """
    slash_index = url.rfind('/')
    if slash_index < 0:
        raise BadFormatError(f'unable to extract filename from url: {url}')

    filename = url[slash_index + 1:]
    if not filename:
        raise BadFormatError(f'url has an empty filename: {url}')
    return filename


def numbered_path(path: Path, number: int) -> Path:
    """Return ``stem_(number).suffix`` next to ``path``."""
    return path.with_name(f'{path.stem}_({number}){path.suffix}')


def resolve_destination(
    url: str,
    target_directory: Union[str, Path]
) -> Path:
    """
    Resolve a collision-free destination path for an image URL.

    The file name is the last path segment of the URL. If a file with that
    name already exists, ``_(1)``, ``_(2)``, ... is appended to the stem
    until a free name is found.

    Args:
        url: Image URL.
        target_directory: Directory the file will be written to.

    Returns:
        A path that does not exist at call time.

    Raises:
        BadFormatError: If no file name can be extracted, or no free name
            is found within MAX_DISAMBIGUATOR attempts.
    """
    path = Path(target_directory) / filename_from_url(url)
    if not path.exists():
        return path

    for number in range(1, MAX_DISAMBIGUATOR + 1):
        candidate = numbered_path(path, number)
        if not candidate.exists():
            logger.debug(f'📝 {path.name} exists, using {candidate.name}')
            return candidate

    raise BadFormatError(
        f'no free file name after {MAX_DISAMBIGUATOR} attempts: {path}'
    )
