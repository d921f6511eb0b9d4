"""
Object reader: logical object names in, Content values out.

The reader is bound once to a storage client and a contents location and
then reused for every request. It owns the key layout and the decision of
whether a body travels as text or base64.
"""

import base64
import logging
import re
from typing import Optional, Protocol

from .location import ContentsLocation, parse_contents_location
from .models import Content, StoredObject

logger = logging.getLogger(__name__)

BINARY_MEDIA_TYPES = frozenset({"image", "video", "audio"})

_SLASH_RUN = re.compile(r"/+")


class ObjectStore(Protocol):
    """
    Interface for the read side of an object store.

    get_object returns None when the key does not exist and raises
    StorageError for every other failure.
    """

    async def get_object(self, bucket: str, key: str) -> Optional[StoredObject]:
        ...


def to_object_key(prefix: str, object_name: str) -> str:
    """Join prefix and name, collapse repeated slashes, drop one leading slash."""
    joined = _SLASH_RUN.sub("/", f"{prefix}/{object_name}")
    return joined[1:] if joined.startswith("/") else joined


def is_binary_media(content_type: Optional[str]) -> bool:
    """True when the primary type is image, video or audio."""
    if not content_type:
        return False
    return content_type.split("/", 1)[0].strip().lower() in BINARY_MEDIA_TYPES


def build_origin_arn(bucket: str, key: str) -> str:
    return f"arn:aws:s3:::{bucket}/{key}"


class ObjectReader:
    """Reads objects relative to a fixed bucket and prefix."""

    def __init__(self, storage: ObjectStore, location: ContentsLocation) -> None:
        self._storage = storage
        self._location = location

    @classmethod
    def from_location_string(cls, value: str, storage: ObjectStore) -> "ObjectReader":
        return cls(storage, parse_contents_location(value))

    @property
    def location(self) -> ContentsLocation:
        return self._location

    async def read(self, object_name: str) -> Optional[Content]:
        """
        Fetch an object by logical name.

        Returns None on a miss. StorageError from the store propagates
        untouched; there is no retry.
        """
        bucket = self._location.bucket
        key = to_object_key(self._location.prefix, object_name)

        logger.info("Reading object", extra={"bucket": bucket, "key": key})

        stored = await self._storage.get_object(bucket, key)
        if stored is None:
            logger.info("Object not found", extra={"bucket": bucket, "key": key})
            return None

        binary = is_binary_media(stored.content_type)
        if binary:
            body = base64.b64encode(stored.body).decode("ascii")
        else:
            body = stored.body.decode("utf-8", errors="replace")

        return Content(
            body=body,
            is_base64_encoded=binary,
            content_type=stored.content_type,
            cache_control=stored.cache_control,
            origin_arn=build_origin_arn(bucket, key),
        )
