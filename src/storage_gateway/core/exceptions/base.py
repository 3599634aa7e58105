"""Base exceptions for the storage gateway.

All gateway errors inherit from StorageGatewayError and carry an error code,
structured details and the HTTP status code used when they are surfaced to
the caller.
"""

import copy
from typing import Any, Dict, Optional


class StorageGatewayError(Exception):
    """Base exception for all storage gateway errors.

    The HTTP status code lives on the error itself so that every layer
    (parser, orchestrator, adapters) decides how its failures are surfaced.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        return self.message

    def public_response(self) -> Dict[str, Any]:
        """Build the ``error`` object of the upload response envelope."""
        response: Dict[str, Any] = {"message": self.public_message}
        if self.details:
            response["data"] = dict(self.details)
        return response

    def extend_error(self, context: str) -> "StorageGatewayError":
        """Return a copy of this error with ``context`` prefixed to its message.

        Status code, error code and details are preserved.
        """
        # Subclass constructors have their own signatures; rebuild through __new__
        extended = self.__class__.__new__(self.__class__)
        extended.__dict__.update(copy.copy(self.__dict__))
        extended.message = f"{context}: {self.message}"
        Exception.__init__(extended, extended.message)
        extended.__cause__ = self.__cause__ or self
        return extended

    def __str__(self) -> str:
        return self.message


def create_error_response(exception: StorageGatewayError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The gateway exception

    Returns:
        Error response dictionary
    """
    return {
        "processedFiles": [],
        "error": exception.public_response(),
    }
