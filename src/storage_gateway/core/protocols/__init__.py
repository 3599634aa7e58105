"""Protocols for the storage gateway's external collaborators."""

from .metadata_registry import MetadataRegistry
from .content_store import ContentStore
from .image_transformer import ImageTransformer

__all__ = [
    "MetadataRegistry",
    "ContentStore",
    "ImageTransformer",
]
