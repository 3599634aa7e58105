"""Upload request exceptions.

Errors raised while validating an upload request: size policy violations and
malformed multipart forms.
"""

from .base import StorageGatewayError


class FileTooSmallError(StorageGatewayError):
    """Raised when a file is smaller than the bucket's minimum upload size."""

    status_code = 400

    def __init__(self, file_name: str, size: int, min_size: int):
        super().__init__(
            message=f"file {file_name} too small: {size} < {min_size}",
            error_code="FILE_TOO_SMALL",
            details={"file": file_name, "size": size, "min_size": min_size},
        )
        self.file_name = file_name
        self.size = size
        self.min_size = min_size


class FileTooBigError(StorageGatewayError):
    """Raised when a file is larger than the bucket's maximum upload size."""

    status_code = 413

    def __init__(self, file_name: str, size: int, max_size: int):
        super().__init__(
            message=f"file {file_name} too big: {size} > {max_size}",
            error_code="FILE_TOO_BIG",
            details={"file": file_name, "size": size, "max_size": max_size},
        )
        self.file_name = file_name
        self.size = size
        self.max_size = max_size


class WrongMetadataFormatError(StorageGatewayError):
    """Raised when a ``metadata[]`` entry is not a valid ``{name, id}`` JSON object."""

    status_code = 400

    def __init__(self, reason: str):
        super().__init__(
            message=f"metadata is not encoded as it should: {reason}",
            error_code="WRONG_METADATA_FORMAT",
        )


class MetadataLengthMismatchError(StorageGatewayError):
    """Raised when ``metadata[]`` is present but its count differs from ``file[]``."""

    status_code = 400

    def __init__(self, files: int, metadata: int):
        super().__init__(
            message="if you are specifying metadata you need to specify it for all the files",
            error_code="METADATA_LENGTH_MISMATCH",
            details={"files": files, "metadata": metadata},
        )


class MultipartFileNotFoundError(StorageGatewayError):
    """Raised when the form carries neither a ``file[]`` nor a ``file`` part."""

    status_code = 400

    def __init__(self):
        super().__init__(
            message="file[] not found in multipart form",
            error_code="MULTIPART_FILE_NOT_FOUND",
        )
