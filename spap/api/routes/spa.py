"""
SPA asset route for the local development server.

Stands in for API Gateway: every GET under the base path is turned into
the same GatewayRequest a proxy event would produce, so the Lambda code
path is what actually serves the response.
"""

import base64
import logging

from fastapi import APIRouter, Request, Response

from ...core.models import GatewayRequest, SpaResponse
from ..dependencies import RequestHandlerDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()


def render_response(spa_response: SpaResponse) -> Response:
    """Convert a SpaResponse into a FastAPI Response."""
    if spa_response.is_base64_encoded:
        content = base64.b64decode(spa_response.body)
    else:
        content = spa_response.body.encode("utf-8")

    return Response(
        content=content,
        status_code=spa_response.status_code,
        headers=spa_response.headers,
    )


@router.get("/{proxy_path:path}", include_in_schema=False)
async def serve_asset(
    proxy_path: str,
    request: Request,
    settings: SettingsDep,
    handler: RequestHandlerDep,
) -> Response:
    gateway_request = GatewayRequest(
        resource=settings.route_resource,
        path=request.url.path,
    )

    spa_response = await handler.handle(gateway_request)

    logger.debug(
        "Served asset",
        extra={"path": gateway_request.path, "status_code": spa_response.status_code}
    )

    return render_response(spa_response)
