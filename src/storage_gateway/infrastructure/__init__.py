"""Adapters for the storage gateway's external collaborators."""

from .hasura_metadata_registry import HasuraMetadataRegistry, create_hasura_metadata_registry
from .s3_content_store import S3ContentStore
from .pillow_image_transformer import PillowImageTransformer

__all__ = [
    "HasuraMetadataRegistry",
    "create_hasura_metadata_registry",
    "S3ContentStore",
    "PillowImageTransformer",
]
