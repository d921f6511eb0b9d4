"""
Object storage client for published SPA contents.

Reads from S3 via boto3, with an in-memory mock for local development.
Only the read side exists; publishing the build into the bucket is done
by the deploy pipeline, not by this service.

Mock mode keeps objects in a dictionary, optionally seeded from a local
build directory, so the whole request flow can be exercised without AWS
credentials.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...core.errors import StorageError
from ...core.models import StoredObject
from ...core.reader import ObjectStore, to_object_key

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = frozenset({"NoSuchKey", "NotFound", "404"})


@dataclass
class StorageConfig:
    """
    Configuration for the S3 client.

    Everything is optional: inside Lambda the region and credentials come
    from the execution environment, and endpoint_url is only set when
    pointing at an S3-compatible server such as MinIO.
    """
    region: Optional[str] = None
    endpoint_url: Optional[str] = None


def is_not_found(error: ClientError) -> bool:
    """True when S3 reported a missing key rather than a real failure."""
    status_code = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    code = error.response.get("Error", {}).get("Code", "")
    return status_code == 404 or code in NOT_FOUND_CODES


class S3StorageClient:
    """
    S3 object storage client.

    Methods are async to match ObjectStore even though boto3 is
    synchronous. The body stream is drained inside get_object so callers
    always get complete bytes. The call blocks the event loop, which is
    fine for one request per Lambda invocation.
    """

    def __init__(self, config: StorageConfig, s3_client=None) -> None:
        self._config = config

        if s3_client is None:
            s3_client = boto3.client(
                "s3",
                region_name=config.region,
                endpoint_url=config.endpoint_url,
                config=Config(signature_version="s3v4"),
            )
        self._s3_client = s3_client

        logger.info(
            "Initialized S3 storage client",
            extra={"region": config.region, "endpoint": config.endpoint_url}
        )

    async def get_object(self, bucket: str, key: str) -> Optional[StoredObject]:
        """Fetch an object, or None if the key does not exist."""
        try:
            response = self._s3_client.get_object(Bucket=bucket, Key=key)
            body = response["Body"].read()

        except ClientError as e:
            if is_not_found(e):
                return None
            logger.error(
                "Failed to get object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Get object failed: {e}") from e

        except BotoCoreError as e:
            logger.error(
                "Failed to get object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise StorageError(f"Get object failed: {e}") from e

        logger.debug(
            "Fetched object",
            extra={"bucket": bucket, "key": key, "size_bytes": len(body)}
        )

        return StoredObject(
            body=body,
            content_type=response.get("ContentType"),
            cache_control=response.get("CacheControl"),
        )


# ---------------------------------------------------------------------------
# Mock Storage for Local Development
# ---------------------------------------------------------------------------

class MockStorageClient:
    """
    In-memory storage for local development and tests.

    Objects are keyed by (bucket, key). A miss returns None exactly like
    the S3 client does, so the fallback logic behaves the same.
    """

    def __init__(self) -> None:
        self._objects: dict[tuple[str, str], StoredObject] = {}
        logger.info("Initialized mock storage client (in-memory)")

    def put_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: Optional[str] = None,
        cache_control: Optional[str] = None,
    ) -> None:
        """Store an object in memory."""
        self._objects[(bucket, key)] = StoredObject(
            body=body,
            content_type=content_type,
            cache_control=cache_control,
        )

    def seed_from_directory(self, bucket: str, prefix: str, root: Path) -> int:
        """
        Load every file under root as if it had been synced to the bucket.

        Content types are guessed from file extensions. Returns the number
        of objects stored.
        """
        count = 0
        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            key = to_object_key(prefix, path.relative_to(root).as_posix())
            content_type, _ = mimetypes.guess_type(path.name)
            self.put_object(
                bucket,
                key,
                path.read_bytes(),
                content_type=content_type or "application/octet-stream",
            )
            count += 1

        logger.info(
            "Seeded mock storage",
            extra={"bucket": bucket, "prefix": prefix, "root": str(root), "count": count}
        )
        return count

    async def get_object(self, bucket: str, key: str) -> Optional[StoredObject]:
        """Retrieve an object from memory."""
        return self._objects.get((bucket, key))


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_storage_client(
    config: Optional[StorageConfig] = None,
    mock_mode: bool = False,
) -> ObjectStore:
    """
    Create storage client based on configuration.

    Args:
        config: S3 configuration (defaults to the environment's region
            and credentials)
        mock_mode: If True, return the in-memory client

    Returns:
        ObjectStore implementation (S3 or Mock)
    """
    if mock_mode:
        return MockStorageClient()

    return S3StorageClient(config or StorageConfig())
