"""
Process-wide construction of the request handler.

Both entry points (the Lambda function and the local FastAPI server)
build exactly one RequestHandler per process and reuse it. Construction
is where configuration is validated, so a bad contents location fails
before any request is served.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .config.settings import Settings, get_settings
from .core.errors import ConfigurationError
from .core.handler import RequestHandler
from .core.location import parse_contents_location
from .core.reader import ObjectReader, ObjectStore
from .infrastructure.storage.client import (
    MockStorageClient,
    StorageConfig,
    create_storage_client,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging at the level from settings."""
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level.upper())
    # Lambda installs its own root handler before our code runs.
    logging.getLogger().setLevel(settings.log_level.upper())


def build_storage_client(settings: Settings) -> ObjectStore:
    """Create the storage client the settings ask for."""
    if settings.storage_mock_mode:
        return create_storage_client(mock_mode=True)

    config = StorageConfig(
        region=settings.aws_region,
        endpoint_url=settings.s3_endpoint_url,
    )
    return create_storage_client(config=config)


def build_request_handler(
    settings: Settings,
    storage: Optional[ObjectStore] = None,
) -> RequestHandler:
    """
    Build a RequestHandler from settings.

    Raises ConfigurationError when the contents location is missing or
    malformed. A storage client may be injected; otherwise one is
    created from settings.
    """
    missing = settings.validate_required_fields()
    if missing:
        logger.error(
            "Missing required configuration",
            extra={"missing_fields": missing}
        )
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    location = parse_contents_location(settings.contents_location)

    if storage is None:
        storage = build_storage_client(settings)

    if isinstance(storage, MockStorageClient) and settings.mock_contents_dir:
        storage.seed_from_directory(
            location.bucket,
            location.prefix,
            Path(settings.mock_contents_dir),
        )

    handler = RequestHandler(ObjectReader(storage, location), rewrite404=settings.rewrite404)

    logger.info(
        "Request handler ready",
        extra={
            "contents_location": location.display,
            "rewrite404": settings.rewrite404,
            "mock_mode": settings.storage_mock_mode,
        }
    )

    return handler


@lru_cache()
def get_request_handler() -> RequestHandler:
    """
    Get the process-wide RequestHandler.

    Built on first use and reused by every later invocation. For tests,
    call get_request_handler.cache_clear() to reset.
    """
    return build_request_handler(get_settings())
