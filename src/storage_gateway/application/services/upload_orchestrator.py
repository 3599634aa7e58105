"""Upload orchestrator.

ONLY upload orchestration - validates, classifies and transcodes each file of
a request, then drives the two-phase interaction with the metadata registry
and the content store, compensating when the content store write fails.
"""

import asyncio
import logging
from contextlib import ExitStack
from typing import Optional

from ...core.entities.bucket import Bucket
from ...core.entities.file_metadata import FileMetadata
from ...core.entities.upload_request import FileData, UploadRequest
from ...core.entities.upload_result import UploadResult
from ...core.exceptions.base import StorageGatewayError
from ...core.exceptions.infrastructure import InternalServerError
from ...core.protocols.content_store import ContentStore
from ...core.protocols.metadata_registry import MetadataRegistry
from ...core.value_objects.content_type import is_transcodable
from ...core.value_objects.request_context import RegistryRequestContext
from ..validators.file_size_validator import FileSizeValidator, create_file_size_validator
from .content_type_resolver import ContentTypeResolver, create_content_type_resolver
from .image_transcoder import ImageTranscoder

logger = logging.getLogger(__name__)


def _as_gateway_error(error: Exception, context: str) -> StorageGatewayError:
    """Pass gateway errors through; wrap anything else as an internal error."""
    if isinstance(error, StorageGatewayError):
        return error
    return InternalServerError(context, error)


class UploadOrchestrator:
    """Uploads the files of one request, strictly in order.

    For every file:
    - size check against the bucket policy
    - content type resolution
    - webp transcoding and blurhash for raster images
    - metadata pre-registration (``is_uploaded`` false)
    - content store write
    - metadata finalize (``is_uploaded`` true, ETag, blurhash)

    Processing stops at the first failing file; files finalized before it are
    kept and returned. A failed content store write triggers a best-effort
    delete of the pre-registered record. Nothing is retried.
    """

    def __init__(
        self,
        metadata_registry: MetadataRegistry,
        content_store: ContentStore,
        image_transcoder: ImageTranscoder,
        content_type_resolver: Optional[ContentTypeResolver] = None,
        file_size_validator: Optional[FileSizeValidator] = None
    ):
        """Initialize upload orchestrator.

        Args:
            metadata_registry: System of record for file metadata
            content_store: Binary object store
            image_transcoder: Raster image normalizer
            content_type_resolver: Content type resolution strategy
            file_size_validator: Bucket size policy enforcement
        """
        self._metadata_registry = metadata_registry
        self._content_store = content_store
        self._image_transcoder = image_transcoder
        self._content_type_resolver = content_type_resolver or create_content_type_resolver()
        self._file_size_validator = file_size_validator or create_file_size_validator()

    async def upload(self, request: UploadRequest, context: RegistryRequestContext) -> UploadResult:
        """Upload every file of ``request``.

        Args:
            request: Normalized upload request
            context: Registry headers for this request

        Returns:
            UploadResult with the finalized files and the error that stopped
            the batch, if any
        """
        result = UploadResult()

        try:
            bucket = await self._metadata_registry.get_bucket_by_id(
                request.bucket_id, context.admin_headers
            )
        except Exception as e:
            result.error = _as_gateway_error(e, f"problem getting bucket {request.bucket_id}")
            return result

        # Transcoded buffers live until the whole batch is done
        with ExitStack() as resources:
            for file in request.files:
                try:
                    metadata = await self._upload_file(file, bucket, context, resources)
                except StorageGatewayError as e:
                    logger.info(f"Upload of file {file.name} ({file.id}) failed: {e.message}")
                    result.error = e
                    break

                result.processed_files.append(metadata)

        logger.info(
            f"Processed {len(result.processed_files)}/{len(request.files)} files "
            f"for bucket {bucket.id}"
        )
        return result

    async def _upload_file(
        self,
        file: FileData,
        bucket: Bucket,
        context: RegistryRequestContext,
        resources: ExitStack
    ) -> FileMetadata:
        self._file_size_validator.validate(file, bucket)

        content, content_type = self._content_type_resolver.resolve(file)

        size = file.size
        fingerprint = ""
        if is_transcodable(content_type):
            transcoded = await asyncio.to_thread(
                self._image_transcoder.transcode, content, file.size, file.name
            )
            resources.enter_context(transcoded.content)
            content = transcoded.content
            content_type = transcoded.content_type
            size = transcoded.size
            fingerprint = transcoded.blurhash

        try:
            await self._metadata_registry.initialize_file(
                file.id, file.name, size, bucket.id, content_type, context.caller_headers
            )
        except Exception as e:
            raise _as_gateway_error(e, f"problem initializing file metadata for file {file.name}")

        try:
            etag = await self._content_store.put_file(content, file.id, content_type)
        except Exception as e:
            await self._discard_pre_registration(file, context)
            error = _as_gateway_error(e, f"problem writing file {file.name}")
            raise error.extend_error("problem uploading file to storage")

        try:
            metadata = await self._metadata_registry.populate_metadata(
                file.id, file.name, size, bucket.id, etag, True, content_type, fingerprint,
                context.admin_headers
            )
        except Exception as e:
            error = _as_gateway_error(e, "unexpected registry failure")
            raise error.extend_error(f"problem populating file metadata for file {file.name}")

        logger.debug(f"Uploaded file {file.name} ({file.id}): {size} bytes, {content_type}")
        return metadata

    async def _discard_pre_registration(self, file: FileData, context: RegistryRequestContext) -> None:
        """Best-effort delete of a pre-registered record; failures are only logged."""
        try:
            await self._metadata_registry.delete_file_by_id(file.id, context.admin_headers)
        except Exception as e:
            logger.warning(f"Could not delete pre-registered metadata for file {file.id}: {e}")


def create_upload_orchestrator(
    metadata_registry: MetadataRegistry,
    content_store: ContentStore,
    image_transcoder: ImageTranscoder,
    content_type_resolver: Optional[ContentTypeResolver] = None,
    file_size_validator: Optional[FileSizeValidator] = None
) -> UploadOrchestrator:
    """Create upload orchestrator."""
    return UploadOrchestrator(
        metadata_registry=metadata_registry,
        content_store=content_store,
        image_transcoder=image_transcoder,
        content_type_resolver=content_type_resolver,
        file_size_validator=file_size_validator
    )
