"""File size validator.

ONLY file size validation - enforces a bucket's minimum and maximum upload
size on a single file.
"""

from ...core.entities.bucket import Bucket
from ...core.entities.upload_request import FileData
from ...core.exceptions.upload import FileTooBigError, FileTooSmallError


class FileSizeValidator:
    """File size validation against bucket policy.

    Both bounds are inclusive: a file exactly ``min_upload_file_size`` or
    exactly ``max_upload_file_size`` bytes long is accepted.
    """

    def validate(self, file: FileData, bucket: Bucket) -> None:
        """Validate a file's size.

        Raises:
            FileTooSmallError: If the file is below the bucket minimum
            FileTooBigError: If the file is above the bucket maximum
        """
        self.check_size(file.name, file.size, bucket.min_upload_file_size, bucket.max_upload_file_size)

    @staticmethod
    def check_size(file_name: str, size: int, min_size: int, max_size: int) -> None:
        if size < min_size:
            raise FileTooSmallError(file_name, size, min_size)
        if size > max_size:
            raise FileTooBigError(file_name, size, max_size)


def create_file_size_validator() -> FileSizeValidator:
    """Create file size validator."""
    return FileSizeValidator()
