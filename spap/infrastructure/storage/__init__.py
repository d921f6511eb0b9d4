"""
Object storage integration for published contents.

S3 via boto3, plus an in-memory mock for local development.
"""

from .client import (
    MockStorageClient,
    S3StorageClient,
    StorageConfig,
    create_storage_client,
)
from ...core.errors import StorageError

__all__ = [
    "MockStorageClient",
    "S3StorageClient",
    "StorageConfig",
    "StorageError",
    "create_storage_client",
]
