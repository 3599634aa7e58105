"""Upload request parser.

ONLY multipart request parsing - detects which upload protocol the caller
used and normalizes the form into an UploadRequest.

Multi-file protocol:
- repeated ``file[]`` parts
- optional repeated ``metadata[]`` JSON values (``{"name": ..., "id": ...}``),
  one per file when present
- optional ``bucket-id`` form value

Legacy protocol:
- a single ``file`` part
- bucket, name and id from the ``x-nhost-bucket-id``, ``x-nhost-file-name``
  and ``x-nhost-file-id`` headers
"""

import logging
import uuid
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from starlette.datastructures import FormData, UploadFile

from ...core.entities.upload_request import FileData, UploadRequest
from ...core.exceptions.upload import (
    MetadataLengthMismatchError,
    MultipartFileNotFoundError,
    WrongMetadataFormatError,
)
from ...core.value_objects.upload_protocol import UploadProtocol

logger = logging.getLogger(__name__)

MULTI_FILE_PART = "file[]"
LEGACY_FILE_PART = "file"
METADATA_PART = "metadata[]"
BUCKET_ID_FIELD = "bucket-id"

BUCKET_ID_HEADER = "x-nhost-bucket-id"
FILE_NAME_HEADER = "x-nhost-file-name"
FILE_ID_HEADER = "x-nhost-file-id"


class FileMetadataInput(BaseModel):
    """Per-file metadata supplied in ``metadata[]``."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    id: Optional[str] = None


# A JSON null entry falls back to the defaults
_METADATA_ENTRY = TypeAdapter(Optional[FileMetadataInput])


def generate_file_id() -> str:
    """Generate an identifier for a file the caller did not name."""
    return str(uuid.uuid4())


def detect_protocol(form: FormData) -> UploadProtocol:
    """Detect the upload protocol from the parts present in ``form``.

    Raises:
        MultipartFileNotFoundError: If neither ``file[]`` nor ``file`` is present
    """
    if _uploaded_files(form, MULTI_FILE_PART):
        return UploadProtocol.MULTI_FILE
    if _uploaded_files(form, LEGACY_FILE_PART):
        return UploadProtocol.LEGACY
    raise MultipartFileNotFoundError()


def _uploaded_files(form: FormData, part: str) -> List[UploadFile]:
    return [value for value in form.getlist(part) if isinstance(value, UploadFile)]


def _measure(upload: UploadFile) -> int:
    if upload.size is not None:
        return upload.size
    stream = upload.file
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return size


def _file_data(upload: UploadFile, name: str, file_id: str) -> FileData:
    return FileData(
        name=name,
        id=file_id,
        content=upload.file,
        size=_measure(upload),
        declared_content_type=upload.content_type or "",
    )


class UploadRequestParser:
    """Parses either upload protocol into an UploadRequest."""

    def __init__(self, default_bucket_id: str = "default"):
        self._default_bucket_id = default_bucket_id

    def parse(self, form: FormData, headers: Mapping[str, str]) -> UploadRequest:
        """Parse an upload form.

        Args:
            form: Parsed multipart form
            headers: Inbound request headers

        Raises:
            MultipartFileNotFoundError: No file part in the form
            MetadataLengthMismatchError: ``metadata[]`` count differs from ``file[]``
            WrongMetadataFormatError: A ``metadata[]`` entry is not valid JSON metadata
        """
        protocol = detect_protocol(form)
        if protocol.is_legacy:
            return self._parse_legacy(form, headers)
        return self._parse_multi_file(form, headers)

    def _parse_multi_file(self, form: FormData, headers: Mapping[str, str]) -> UploadRequest:
        uploads = _uploaded_files(form, MULTI_FILE_PART)

        metadata = form.getlist(METADATA_PART)
        if metadata and len(metadata) != len(uploads):
            raise MetadataLengthMismatchError(len(uploads), len(metadata))

        files = []
        for index, upload in enumerate(uploads):
            entry = self._parse_metadata(metadata[index]) if metadata else FileMetadataInput()
            files.append(_file_data(
                upload,
                name=entry.name or upload.filename or "",
                file_id=entry.id or generate_file_id(),
            ))

        bucket_id = form.get(BUCKET_ID_FIELD)
        if not isinstance(bucket_id, str) or not bucket_id:
            bucket_id = self._default_bucket_id

        return UploadRequest(
            bucket_id=bucket_id,
            files=tuple(files),
            headers=dict(headers.items()),
            protocol=UploadProtocol.MULTI_FILE,
        )

    def _parse_legacy(self, form: FormData, headers: Mapping[str, str]) -> UploadRequest:
        uploads = _uploaded_files(form, LEGACY_FILE_PART)
        if len(uploads) > 1:
            logger.warning(f"Legacy upload with {len(uploads)} file parts; only the first is used")
        upload = uploads[0]

        file = _file_data(
            upload,
            name=headers.get(FILE_NAME_HEADER) or upload.filename or "",
            file_id=headers.get(FILE_ID_HEADER) or generate_file_id(),
        )

        return UploadRequest(
            bucket_id=headers.get(BUCKET_ID_HEADER) or self._default_bucket_id,
            files=(file,),
            headers=dict(headers.items()),
            protocol=UploadProtocol.LEGACY,
        )

    @staticmethod
    def _parse_metadata(value) -> FileMetadataInput:
        if not isinstance(value, str):
            raise WrongMetadataFormatError("metadata[] must be a form value, not a file")
        try:
            entry = _METADATA_ENTRY.validate_json(value)
        except ValidationError as e:
            raise WrongMetadataFormatError(str(e)) from e
        return entry if entry is not None else FileMetadataInput()


def create_upload_request_parser(default_bucket_id: str = "default") -> UploadRequestParser:
    """Create upload request parser."""
    return UploadRequestParser(default_bucket_id)
