"""
Services layer module.

Contains business logic that orchestrates the feed client and helpers.

Directory structure:
- file/   : Destination naming and local image store
- image/  : Image URL extraction and normalization
"""

# Pipeline
from fdown.services.entry_pipeline import (
    EntryPipeline,
    PipelineOptions,
    PipelineResult,
)

# File services
from fdown.services.file import LocalImageStore, resolve_destination

# Filter services
from fdown.services.filter_service import build_category_filter

# Image services
from fdown.services.image import extract_image_url, normalize_image_url

__all__ = [
    # Pipeline
    'EntryPipeline',
    'PipelineOptions',
    'PipelineResult',
    # File services
    'LocalImageStore',
    'resolve_destination',
    # Filter services
    'build_category_filter',
    # Image services
    'extract_image_url',
    'normalize_image_url',
]
