"""Upload result entity.

ONLY orchestration outcome - files finalized so far plus the error that
stopped the batch, if any.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..exceptions.base import StorageGatewayError
from .file_metadata import FileMetadata


@dataclass
class UploadResult:
    """Result of uploading a batch of files.

    ``processed_files`` keeps the files finalized before a failure; the batch
    stops at the first failing file.
    """

    processed_files: List[FileMetadata] = field(default_factory=list)
    error: Optional[StorageGatewayError] = None

    @property
    def success(self) -> bool:
        return self.error is None
