"""Upload request parsing."""

from .upload_request_parser import (
    UploadRequestParser,
    create_upload_request_parser,
    detect_protocol,
)

__all__ = ["UploadRequestParser", "create_upload_request_parser", "detect_protocol"]
