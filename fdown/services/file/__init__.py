"""
File services module.

Contains destination naming and the local image store.
"""

from fdown.services.file.file_namer import (
    MAX_DISAMBIGUATOR,
    filename_from_url,
    resolve_destination,
)
from fdown.services.file.local_image_store import LocalImageStore

__all__ = [
    'MAX_DISAMBIGUATOR',
    'LocalImageStore',
    'filename_from_url',
    'resolve_destination',
]
