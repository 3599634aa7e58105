"""Content type constants.

ONLY content type vocabulary - the placeholder type that triggers sniffing
and the raster formats normalized to webp.
"""

OCTET_STREAM = "application/octet-stream"
WEBP = "image/webp"

# Raster formats transcoded to webp on upload
TRANSCODABLE_IMAGE_TYPES = frozenset({
    "image/webp",
    "image/png",
    "image/jpeg",
})


def is_declared(content_type: str) -> bool:
    """Check whether a declared content type can be trusted as-is."""
    return bool(content_type) and content_type != OCTET_STREAM


def is_transcodable(content_type: str) -> bool:
    """Check whether a content type is one of the raster formats normalized to webp."""
    return content_type in TRANSCODABLE_IMAGE_TYPES
