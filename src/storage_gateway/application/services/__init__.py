"""Upload application services."""

from .content_type_resolver import ContentTypeResolver, create_content_type_resolver
from .image_transcoder import ImageTranscoder, TranscodedImage, create_image_transcoder
from .upload_orchestrator import UploadOrchestrator, create_upload_orchestrator

__all__ = [
    "ContentTypeResolver",
    "create_content_type_resolver",
    "ImageTranscoder",
    "TranscodedImage",
    "create_image_transcoder",
    "UploadOrchestrator",
    "create_upload_orchestrator",
]
