"""Shared fixtures for unit tests."""

import asyncio

import pytest

from spap.core.handler import RequestHandler
from spap.core.location import ContentsLocation
from spap.core.reader import ObjectReader
from spap.infrastructure.storage.client import MockStorageClient

BUCKET = "my-bucket"
PREFIX = "site"

# 1x1 transparent PNG, with bytes that are not valid UTF-8
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\xff"
    b"\xff?\x00\x05\xfe\x02\xfe\xa7\x35\x81\x84\x00\x00\x00\x00IEND\xaeB`\x82"
)


def run(coro):
    """Drive a coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def storage() -> MockStorageClient:
    """Mock storage seeded with a small SPA build under my-bucket/site."""
    client = MockStorageClient()
    client.put_object(
        BUCKET, "site/index.html", b"<html>app</html>",
        content_type="text/html", cache_control="no-cache",
    )
    client.put_object(
        BUCKET, "site/css/app.css", b"body { color: red; }",
        content_type="text/css", cache_control="max-age=31536000",
    )
    client.put_object(BUCKET, "site/img/logo.png", PNG_BYTES, content_type="image/png")
    client.put_object(BUCKET, "site/docs/index.html", b"<html>docs</html>", content_type="text/html")
    return client


@pytest.fixture
def location() -> ContentsLocation:
    return ContentsLocation(bucket=BUCKET, prefix=PREFIX)


@pytest.fixture
def reader(storage, location) -> ObjectReader:
    return ObjectReader(storage, location)


@pytest.fixture
def handler(reader) -> RequestHandler:
    return RequestHandler(reader)
