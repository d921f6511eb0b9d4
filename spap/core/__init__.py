"""
Core publishing logic.

Framework-agnostic: nothing here imports FastAPI or the Lambda runtime,
and storage is reached only through the ObjectStore protocol.
"""

from .errors import ConfigurationError, SpapError, StorageError
from .handler import RequestHandler, resolve_object_name
from .location import ContentsLocation, parse_contents_location
from .models import (
    Content,
    GatewayRequest,
    NotFoundResponse,
    OkResponse,
    SpaResponse,
    StoredObject,
)
from .reader import ObjectReader, ObjectStore, is_binary_media, to_object_key

__all__ = [
    "ConfigurationError",
    "SpapError",
    "StorageError",
    "RequestHandler",
    "resolve_object_name",
    "ContentsLocation",
    "parse_contents_location",
    "Content",
    "GatewayRequest",
    "NotFoundResponse",
    "OkResponse",
    "SpaResponse",
    "StoredObject",
    "ObjectReader",
    "ObjectStore",
    "is_binary_media",
    "to_object_key",
]
