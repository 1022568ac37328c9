"""
Tests for image URL extraction and normalization.
"""

import pytest

from fdown.core.domain import EntryDetail, EntryVisual
from fdown.services.image import extract_image_url, normalize_image_url
from tests.fixtures.test_data import TUMBLR_URL, TUMBLR_URL_MAX


class TestNormalizeImageUrl:
    """Tests for normalize_image_url()."""

    def test_rewrites_size_suffix(self):
        """A numeric size suffix becomes the maximum resolution."""
        assert normalize_image_url(TUMBLR_URL) == TUMBLR_URL_MAX

    @pytest.mark.parametrize('url', [
        'https://example.com/images/photo.jpg',
        'https://example.com/images/photo_large.jpg',
        'https://example.com/images/photo_500',
        'https://example.com/images/photo_500.jpg?size=2',
        '',
    ])
    def test_unchanged_without_size_suffix(self, url):
        """URLs without '_<digits>.<ext>' at the end are returned as-is."""
        assert normalize_image_url(url) == url

    def test_only_final_suffix_rewritten(self):
        """Digits earlier in the path are left alone."""
        url = 'https://x.com/2017_05/img_75.png'

        assert normalize_image_url(url) == 'https://x.com/2017_05/img_1280.png'

    @pytest.mark.parametrize('url', [
        TUMBLR_URL,
        TUMBLR_URL_MAX,
        'https://example.com/a_1.gif',
        'https://example.com/plain.jpg',
    ])
    def test_idempotent(self, url):
        """Applying twice equals applying once."""
        once = normalize_image_url(url)

        assert normalize_image_url(once) == once


class TestExtractImageUrl:
    """Tests for extract_image_url()."""

    def test_no_visual(self):
        """No visual means no image."""
        assert extract_image_url(EntryDetail(id='e1', visual=None)) is None

    def test_visual_without_url(self):
        """A visual with no URL means no image."""
        entry = EntryDetail(id='e1', visual=EntryVisual(content_type='image/png'))

        assert extract_image_url(entry) is None

    def test_visual_url(self):
        """Returns the nested URL when present."""
        entry = EntryDetail(id='e1', visual=EntryVisual(url=TUMBLR_URL))

        assert extract_image_url(entry) == TUMBLR_URL

    def test_literal_none_url(self):
        """The service's 'none' placeholder means no image."""
        entry = EntryDetail(id='e1', visual=EntryVisual(url='none'))

        assert extract_image_url(entry) is None
