"""
Test configuration and fixtures for fdown tests.

This module provides:
- Pytest fixtures for the feed client and pipeline
- A recording transport in place of the network
- Temporary config files and target directories
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests.fixtures.recording_transport import RecordingTransport  # noqa: E402
from tests.fixtures.test_data import (  # noqa: E402
    TEST_BASE_URL,
    TEST_TOKEN,
    TEST_USERID,
)


# ==================== Environment ====================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep FDOWN_* variables from leaking into configuration tests."""
    for key in (
        'FDOWN_USERID',
        'FDOWN_TOKEN',
        'FDOWN_TARGET_DIR',
        'FDOWN_UNSAVE_PARTIAL',
        'FDOWN_DROPBOX_TOKEN',
        'FDOWN_CONFIG',
    ):
        monkeypatch.delenv(key, raising=False)


# ==================== Transport ====================

@pytest.fixture
def transport():
    """Recording transport with an empty script."""
    return RecordingTransport()


@pytest.fixture
def feed_client(transport):
    """FeedlyClient over the recording transport."""
    from fdown.infrastructure.feed import FeedlyClient

    return FeedlyClient(TEST_USERID, TEST_TOKEN, transport, TEST_BASE_URL)


# ==================== Filesystem ====================

@pytest.fixture
def target_dir(tmp_path) -> Path:
    """Create a temporary image directory."""
    directory = tmp_path / 'images'
    directory.mkdir()
    return directory


@pytest.fixture
def image_store(target_dir):
    """Local image store writing into ``target_dir``."""
    from fdown.services.file import LocalImageStore

    return LocalImageStore(target_dir)


@pytest.fixture
def pipeline(feed_client, transport, image_store):
    """Pipeline wired to the recording transport and a temp directory."""
    from fdown.services.entry_pipeline import EntryPipeline

    return EntryPipeline(feed_client, transport, image_store)


@pytest.fixture
def config_file(tmp_path, target_dir) -> Path:
    """Write a valid config file."""
    path = tmp_path / 'fdown.conf'
    path.write_text(
        '# fdown test config\n'
        f'userid = {TEST_USERID}\n'
        f'token = {TEST_TOKEN}\n'
        '\n'
        f'target_dir = {target_dir}\n',
        encoding='utf-8'
    )
    return path
