"""Hasura metadata registry adapter.

This module implements the MetadataRegistry protocol over the registry's
GraphQL API using aiohttp. Registry errors are mapped to RegistryError with a
status code derived from the GraphQL error extension code.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp
from pydantic import ValidationError

from ..core.entities.bucket import Bucket
from ..core.entities.file_metadata import FileMetadata
from ..core.exceptions.infrastructure import (
    BucketNotFoundError,
    InternalServerError,
    RegistryError,
)
from . import queries

logger = logging.getLogger(__name__)


class HasuraMetadataRegistry:
    """GraphQL client for the metadata registry.

    One aiohttp session is shared by all requests and created lazily; call
    ``close`` on shutdown.
    """

    def __init__(
        self,
        endpoint: str,
        timeout_seconds: int = 30,
        session: Optional[aiohttp.ClientSession] = None,
        user_agent: str = "storage-gateway"
    ):
        """Initialize the registry client.

        Args:
            endpoint: GraphQL endpoint URL
            timeout_seconds: Total timeout per registry call
            session: Optional pre-configured session (not closed by ``close``)
            user_agent: User agent string for registry requests
        """
        self._endpoint = endpoint
        self._timeout = timeout_seconds
        self._user_agent = user_agent
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
                headers={"User-Agent": self._user_agent}
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def get_bucket_by_id(self, bucket_id: str, headers: Dict[str, str]) -> Bucket:
        data = await self._execute(queries.BUCKET_GET_BY_ID, {"id": bucket_id}, headers)
        bucket = data.get("bucket")
        if bucket is None:
            raise BucketNotFoundError(bucket_id)
        try:
            return Bucket.model_validate(bucket)
        except ValidationError as e:
            raise InternalServerError("unexpected registry response for bucket", e) from e

    async def initialize_file(
        self,
        file_id: str,
        name: str,
        size: int,
        bucket_id: str,
        mime_type: str,
        headers: Dict[str, str]
    ) -> None:
        await self._execute(
            queries.FILE_INSERT,
            {
                "object": {
                    "id": file_id,
                    "name": name,
                    "size": size,
                    "bucketId": bucket_id,
                    "mimeType": mime_type,
                }
            },
            headers,
        )

    async def populate_metadata(
        self,
        file_id: str,
        name: str,
        size: int,
        bucket_id: str,
        etag: str,
        is_uploaded: bool,
        mime_type: str,
        blurhash: str,
        headers: Dict[str, str]
    ) -> FileMetadata:
        data = await self._execute(
            queries.FILE_UPDATE,
            {
                "id": file_id,
                "set": {
                    "name": name,
                    "size": size,
                    "bucketId": bucket_id,
                    "etag": etag,
                    "isUploaded": is_uploaded,
                    "mimeType": mime_type,
                    "blurhash": blurhash,
                },
            },
            headers,
        )
        updated = data.get("updateFile")
        if updated is None:
            raise RegistryError(f"file {file_id} not found while populating metadata")
        try:
            return FileMetadata.model_validate(updated)
        except ValidationError as e:
            raise InternalServerError("unexpected registry response for file metadata", e) from e

    async def delete_file_by_id(self, file_id: str, headers: Dict[str, str]) -> None:
        await self._execute(queries.FILE_DELETE, {"id": file_id}, headers)

    async def _execute(
        self,
        query: str,
        variables: Dict[str, Any],
        headers: Dict[str, str]
    ) -> Dict[str, Any]:
        """Run a GraphQL operation and return its ``data`` object."""
        session = await self._get_session()

        try:
            async with session.post(
                self._endpoint,
                json={"query": query, "variables": variables},
                headers=headers,
            ) as response:
                status = response.status
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise InternalServerError("problem executing registry request", e) from e

        if not isinstance(payload, dict):
            raise RegistryError(f"unexpected registry response with status {status}")

        errors = payload.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) else errors
            if not isinstance(first, dict):
                first = {}
            extensions = first.get("extensions") or {}
            code = extensions.get("code") if isinstance(extensions, dict) else None
            message = first.get("message") or "unknown registry error"
            logger.debug(f"Registry error ({code}): {message}")
            raise RegistryError(message, registry_code=code)

        if status >= 400:
            raise RegistryError(f"registry responded with status {status}")

        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise RegistryError("unexpected registry response without a data object")
        return data


def create_hasura_metadata_registry(
    endpoint: str,
    timeout_seconds: int = 30,
    session: Optional[aiohttp.ClientSession] = None,
    user_agent: str = "storage-gateway"
) -> HasuraMetadataRegistry:
    """Create Hasura metadata registry client."""
    return HasuraMetadataRegistry(
        endpoint, timeout_seconds=timeout_seconds, session=session, user_agent=user_agent
    )
