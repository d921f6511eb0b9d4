"""
AWS Lambda entry point.

Deploy with handler "spap.lambda_function.lambda_handler" behind an
API Gateway REST API proxy resource such as /spa/{proxy+}.

The RequestHandler is built at import, during the Lambda init phase, and
reused across warm invocations. Errors are not caught here: the Lambda runtime
reports them and API Gateway answers with its generic 502.
"""

import asyncio
import json
import logging
from typing import Any

from .bootstrap import configure_logging, get_request_handler
from .config.settings import get_settings
from .core.models import GatewayRequest

logger = logging.getLogger(__name__)

configure_logging(get_settings())

# Fails the init phase on a bad contents location.
get_request_handler()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Serve one API Gateway proxy event."""
    logger.info(json.dumps(event, default=str))

    handler = get_request_handler()
    request = GatewayRequest.from_event(event)

    response = asyncio.run(handler.handle(request))

    logger.info(
        "Served request",
        extra={"path": request.path, "status_code": response.status_code}
    )

    return response.to_gateway()
