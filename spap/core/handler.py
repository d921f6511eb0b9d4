"""
Request handler: the single entry point for serving a request.

Turns a gateway request into an object name, reads it, applies the
one-shot 404 rewrite, and picks the response variant.
"""

import logging
from typing import Optional

from .models import GatewayRequest, NotFoundResponse, OkResponse, SpaResponse
from .reader import ObjectReader

logger = logging.getLogger(__name__)

PROXY_PLACEHOLDER = "{proxy+}"
DEFAULT_DOCUMENT = "index.html"


def resolve_object_name(resource: str, path: str) -> str:
    """
    Derive the object name from a route template and the literal path.

    resource="/spa/{proxy+}", path="/spa/css/app.css" gives "css/app.css".
    A trailing slash means a directory and gets the default document.
    """
    base_path = resource.replace(PROXY_PLACEHOLDER, "")
    specific = path.replace(base_path, "", 1)

    if specific.endswith("/"):
        return specific + DEFAULT_DOCUMENT
    return specific


class RequestHandler:
    """
    Serves SPA assets from an ObjectReader.

    Holds no per-request state, so one instance is shared by every
    invocation in the process.
    """

    def __init__(self, reader: ObjectReader, rewrite404: Optional[str] = None) -> None:
        self._reader = reader
        self._rewrite404 = rewrite404 or None

    @property
    def reader(self) -> ObjectReader:
        return self._reader

    @property
    def rewrite404(self) -> Optional[str]:
        return self._rewrite404

    async def handle(self, request: GatewayRequest) -> SpaResponse:
        object_name = resolve_object_name(request.resource, request.path)

        content = await self._reader.read(object_name)

        # Single fallback, never chained.
        if content is None and self._rewrite404:
            content = await self._reader.read(self._rewrite404)
            logger.info(
                "Object not found, rewritten",
                extra={"object_name": object_name, "rewrite404": self._rewrite404}
            )

        if content is None:
            return NotFoundResponse.for_path(request.path)
        return OkResponse.from_content(content)
