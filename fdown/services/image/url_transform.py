"""
Image URL transform module.

Pure helpers that pick an entry's image URL and ask the CDN for its
largest variant.
"""

import re
from typing import Optional

from fdown.core.domain import EntryDetail

# Largest size variant the Tumblr CDN serves
MAX_RESOLUTION = 1280

# Placeholder url for visuals without an image
NO_IMAGE_URL = 'none'

_SIZE_SUFFIX_PATTERN = re.compile(r'_(\d+)(\.[A-Za-z0-9]+)$')


def normalize_image_url(url: str) -> str:
    """
    Rewrite a ``_<size>.<ext>`` suffix to the maximum resolution.

    URLs without a numeric size suffix are returned unchanged. Applying the
    function twice gives the same result as applying it once.

    Example:
        >>> normalize_image_url('https://x.media.tumblr.com/abc/tumblr_xyz_500.jpg')
        'https://x.media.tumblr.com/abc/tumblr_xyz_1280.jpg'
    """
    return _SIZE_SUFFIX_PATTERN.sub(rf'_{MAX_RESOLUTION}\2', url)


def extract_image_url(entry: EntryDetail) -> Optional[str]:
    """
    Return the entry's visual URL, or None when it has none.

    The service reports a visual without an image as the literal 'none'.
    """
    if entry.visual is None:
        return None
    url = entry.visual.url
    if not url or url == NO_IMAGE_URL:
        return None
    return url
