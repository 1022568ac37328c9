"""
Tests for the local image store.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from fdown.core.exceptions import BadFormatError, FilesystemError
from fdown.services.file import LocalImageStore


class _FullDiskFile:
    """File wrapper whose write fails after a partial write."""

    def __init__(self, f):
        self._f = f

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._f.close()

    def write(self, data):
        self._f.write(data[:2])
        raise OSError(28, 'No space left on device')


class TestLocalImageStore:
    """Tests for LocalImageStore.save()."""

    def test_writes_bytes(self, image_store, target_dir):
        """Should write the bytes under the URL's file name."""
        path = image_store.save('http://x.com/pic.png', b'\x89PNG')

        assert Path(path) == target_dir / 'pic.png'
        assert Path(path).read_bytes() == b'\x89PNG'

    def test_never_overwrites(self, image_store, target_dir):
        """An existing file keeps its content; the new one is numbered."""
        (target_dir / 'pic.png').write_bytes(b'old')

        path = image_store.save('http://x.com/pic.png', b'new')

        assert Path(path) == target_dir / 'pic_(1).png'
        assert (target_dir / 'pic.png').read_bytes() == b'old'
        assert Path(path).read_bytes() == b'new'

    def test_creates_directory(self, tmp_path):
        """A missing target directory is created."""
        store = LocalImageStore(tmp_path / 'a' / 'b')

        path = store.save('http://x.com/pic.png', b'data')

        assert Path(path).exists()

    def test_bad_url(self, image_store):
        """A URL without a file name is rejected before writing."""
        with pytest.raises(BadFormatError):
            image_store.save('pic.png', b'data')

    def test_directory_is_a_file(self, tmp_path):
        """An unusable target directory raises FilesystemError."""
        blocker = tmp_path / 'blocker'
        blocker.write_bytes(b'')
        store = LocalImageStore(blocker / 'images')

        with pytest.raises(FilesystemError) as exc_info:
            store.save('http://x.com/pic.png', b'data')

        assert exc_info.value.path == str(blocker / 'images')

    def test_failed_write_leaves_no_file(self, image_store, target_dir):
        """A write error removes the partial file so its name stays free."""
        with patch(
            'fdown.services.file.local_image_store.open',
            create=True,
            side_effect=lambda path, mode: _FullDiskFile(open(path, mode))
        ):
            with pytest.raises(FilesystemError) as exc_info:
                image_store.save('http://x.com/pic.png', b'data')

        assert exc_info.value.path == str(target_dir / 'pic.png')
        assert list(target_dir.iterdir()) == []
        assert image_store.save('http://x.com/pic.png', b'data') == str(
            target_dir / 'pic.png'
        )
