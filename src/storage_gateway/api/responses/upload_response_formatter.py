"""Upload response formatter.

ONLY response shaping - builds the HTTP response for an upload according to
the protocol the caller used.
"""

from typing import Iterable, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from ...core.entities.file_metadata import FileMetadata
from ...core.entities.upload_result import UploadResult
from ...core.exceptions.base import StorageGatewayError
from ...core.value_objects.upload_protocol import UploadProtocol

LEGACY_DEPRECATION_HEADER = "X-deprecation-warning-old-upload-file-method"
LEGACY_DEPRECATION_MESSAGE = (
    "please, update the SDK to leverage new API endpoint or read the API docs to adapt your code"
)


class UploadResponseFormatter:
    """Shapes upload results.

    - multi-file success: ``{"processedFiles": [...], "error": null}``, 201
    - legacy success: the single file metadata object, 201
    - any failure: ``{"processedFiles": [...], "error": {...}}`` with the
      error's own status code
    """

    def format(self, protocol: UploadProtocol, result: UploadResult) -> JSONResponse:
        if result.error is not None:
            return self.format_error(result.error, result.processed_files, protocol)

        if protocol.is_legacy:
            response = JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content=result.processed_files[0].to_response(),
            )
        else:
            response = JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content={
                    "processedFiles": [metadata.to_response() for metadata in result.processed_files],
                    "error": None,
                },
            )
        return self._with_protocol_headers(response, protocol)

    def format_error(
        self,
        error: StorageGatewayError,
        processed_files: Iterable[FileMetadata] = (),
        protocol: Optional[UploadProtocol] = None
    ) -> JSONResponse:
        response = JSONResponse(
            status_code=error.status_code,
            content={
                "processedFiles": [metadata.to_response() for metadata in processed_files],
                "error": error.public_response(),
            },
        )
        return self._with_protocol_headers(response, protocol)

    @staticmethod
    def _with_protocol_headers(response: JSONResponse, protocol: Optional[UploadProtocol]) -> JSONResponse:
        if protocol is not None and protocol.is_legacy:
            response.headers[LEGACY_DEPRECATION_HEADER] = LEGACY_DEPRECATION_MESSAGE
        return response
