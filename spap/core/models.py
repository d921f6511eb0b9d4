"""
Domain models for the publisher.

These are plain values with no knowledge of boto3, FastAPI or the Lambda
runtime. The two response variants form a closed union: a request ends in
exactly one of OkResponse or NotFoundResponse.
"""

import html
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

ORIGIN_ARN_HEADER = "X-SPAP-Origin-Arn"

NOT_FOUND_TEMPLATE = (
    "<html><h1>404</h1><h3>Not found</h3>"
    "<p> The requested URL {path} was not found.</p></html>"
)


@dataclass(frozen=True)
class StoredObject:
    """
    An object exactly as the store returned it.

    The body is fully drained before this is built, so nothing downstream
    ever touches a stream.
    """
    body: bytes
    content_type: Optional[str] = None
    cache_control: Optional[str] = None


@dataclass(frozen=True)
class Content:
    """
    An object ready to be placed in a response body.

    is_base64_encoded is True iff the object was classified as binary
    media, in which case body holds base64 text.
    """
    body: str
    is_base64_encoded: bool = False
    content_type: Optional[str] = None
    cache_control: Optional[str] = None
    origin_arn: Optional[str] = None


@dataclass(frozen=True)
class GatewayRequest:
    """The parts of a gateway proxy event the handler cares about."""
    resource: str
    path: str

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "GatewayRequest":
        """Build from an API Gateway proxy event."""
        return cls(resource=event["resource"], path=event["path"])


@dataclass(frozen=True)
class OkResponse:
    """A 200 built from fetched content."""
    body: str
    headers: dict[str, str] = field(default_factory=dict)
    is_base64_encoded: bool = False
    status_code: Literal[200] = 200

    @classmethod
    def from_content(cls, content: Content) -> "OkResponse":
        headers: dict[str, str] = {}
        if content.cache_control:
            headers["Cache-Control"] = content.cache_control
        if content.content_type:
            headers["Content-Type"] = content.content_type
        if content.origin_arn:
            headers[ORIGIN_ARN_HEADER] = content.origin_arn

        return cls(
            body=content.body,
            headers=headers,
            is_base64_encoded=content.is_base64_encoded,
        )

    def to_gateway(self) -> dict[str, Any]:
        return _to_gateway(self)


@dataclass(frozen=True)
class NotFoundResponse:
    """A 404 naming the path the client asked for."""
    body: str
    headers: dict[str, str] = field(default_factory=lambda: {"Content-Type": "text/html"})
    is_base64_encoded: bool = False
    status_code: Literal[404] = 404

    @classmethod
    def for_path(cls, path: str) -> "NotFoundResponse":
        return cls(body=NOT_FOUND_TEMPLATE.format(path=html.escape(path)))

    def to_gateway(self) -> dict[str, Any]:
        return _to_gateway(self)


SpaResponse = Union[OkResponse, NotFoundResponse]


def _to_gateway(response: SpaResponse) -> dict[str, Any]:
    """Render as an API Gateway proxy integration result."""
    return {
        "statusCode": response.status_code,
        "headers": dict(response.headers),
        "body": response.body,
        "isBase64Encoded": response.is_base64_encoded,
    }
