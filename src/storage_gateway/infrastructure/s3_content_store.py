"""S3 content store adapter.

Stores file content in an S3-compatible bucket through the aioboto3
asynchronous client. Objects are addressed by ``<root_folder>/<file_id>``.
"""

import logging
from typing import BinaryIO, Optional

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config.settings import StorageGatewaySettings
from ..core.exceptions.infrastructure import ContentStoreError

logger = logging.getLogger(__name__)


class S3ContentStore:
    """S3-backed content store."""

    def __init__(
        self,
        bucket: str,
        root_folder: str = "",
        endpoint_url: Optional[str] = None,
        region: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        session: Optional[aioboto3.Session] = None
    ):
        self._bucket = bucket
        self._root_folder = root_folder.strip("/")
        self._endpoint_url = endpoint_url
        self._region = region
        self._access_key = access_key
        self._secret_key = secret_key
        self._session = session or aioboto3.Session()

    @classmethod
    def from_settings(cls, settings: StorageGatewaySettings) -> "S3ContentStore":
        return cls(
            bucket=settings.s3_bucket,
            root_folder=settings.s3_root_folder,
            endpoint_url=settings.s3_endpoint,
            region=settings.s3_region,
            access_key=settings.s3_access_key,
            secret_key=settings.s3_secret_key.get_secret_value() or None,
        )

    def build_key(self, file_id: str) -> str:
        """Build the object key for a file."""
        if self._root_folder:
            return f"{self._root_folder}/{file_id}"
        return file_id

    def _get_client(self):
        return self._session.client(
            "s3",
            endpoint_url=self._endpoint_url,
            region_name=self._region,
            aws_access_key_id=self._access_key,
            aws_secret_access_key=self._secret_key,
        )

    async def put_file(self, content: BinaryIO, file_id: str, content_type: str) -> str:
        key = self.build_key(file_id)

        try:
            async with self._get_client() as s3_client:
                response = await s3_client.put_object(
                    Bucket=self._bucket,
                    Key=key,
                    Body=content.read(),
                    ContentType=content_type,
                )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            logger.error(f"Error putting object s3://{self._bucket}/{key} ({error_code}): {e}")
            raise ContentStoreError(f"problem putting object {key}: {e}", store_code=error_code) from e
        except BotoCoreError as e:
            logger.error(f"Error putting object s3://{self._bucket}/{key}: {e}")
            raise ContentStoreError(f"problem putting object {key}: {e}") from e

        logger.debug(f"Stored object s3://{self._bucket}/{key}")
        return response["ETag"]
