"""
Infrastructure storage module.

Contains remote image store adapters.
"""

from fdown.infrastructure.storage.dropbox_uploader import DropboxUploader

__all__ = [
    'DropboxUploader',
]
