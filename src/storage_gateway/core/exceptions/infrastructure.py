"""Infrastructure exceptions for the storage gateway.

Errors raised by the external collaborators (metadata registry, content
store) and the generic internal error wrapper.
"""

from typing import Any, Dict, Optional

from .base import StorageGatewayError


class InternalServerError(StorageGatewayError):
    """Wraps unexpected I/O, decode or codec failures.

    The full message (including the wrapped cause) is logged; the caller only
    sees a generic message.
    """

    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message=message, error_code="INTERNAL_SERVER_ERROR")
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def public_message(self) -> str:
        return "an internal server error occurred"


class BucketNotFoundError(StorageGatewayError):
    """Raised when the target bucket does not exist in the registry."""

    status_code = 404

    def __init__(self, bucket_id: str):
        super().__init__(
            message=f"bucket {bucket_id} not found",
            error_code="BUCKET_NOT_FOUND",
            details={"bucket_id": bucket_id},
        )
        self.bucket_id = bucket_id


class RegistryError(StorageGatewayError):
    """Raised when the metadata registry rejects an operation."""

    # Registry error codes mapped to HTTP status codes
    STATUS_BY_CODE = {
        "permission-error": 403,
        "access-denied": 403,
        "invalid-jwt": 401,
        "invalid-headers": 401,
        "constraint-violation": 409,
        "data-exception": 400,
        "validation-failed": 400,
    }

    def __init__(
        self,
        message: str,
        registry_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="REGISTRY_ERROR",
            details=details,
            status_code=self.STATUS_BY_CODE.get(registry_code or "", 500),
        )
        self.registry_code = registry_code

    @property
    def public_message(self) -> str:
        if self.status_code >= 500:
            return "an internal server error occurred"
        return self.message


class ContentStoreError(StorageGatewayError):
    """Raised when the content store fails to accept or delete an object."""

    status_code = 500

    def __init__(self, message: str, store_code: Optional[str] = None):
        super().__init__(message=message, error_code="CONTENT_STORE_ERROR")
        self.store_code = store_code

    @property
    def public_message(self) -> str:
        return "an internal server error occurred"
