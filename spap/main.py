"""
Local development server.

Serves the publisher through FastAPI so an SPA build can be checked
without deploying the Lambda function. Production traffic goes through
spap.lambda_function instead.

For local development against a build directory:
    SPAP_STORAGE_MOCK_MODE=true SPAP_MOCK_CONTENTS_DIR=./dist \
    SPAP_CONTENTS_LOCATION=s3://local-bucket uvicorn spap.main:app --reload

Against a real bucket:
    SPAP_CONTENTS_LOCATION=s3://my-bucket/site uvicorn spap.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from . import __version__
from .api.routes import health, spa
from .bootstrap import build_request_handler, configure_logging
from .config.settings import Settings, get_settings
from .core.handler import RequestHandler

configure_logging(get_settings())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the shared RequestHandler unless one was injected. A bad
    contents location raises ConfigurationError here and the server
    never starts accepting requests.
    """
    settings: Settings = app.state.settings

    logger.info(
        "SPAP local server starting",
        extra={
            "version": __version__,
            "base_path": settings.local_base_path,
            "mock_mode": settings.storage_mock_mode,
        }
    )

    if app.state.request_handler is None:
        app.state.request_handler = build_request_handler(settings)

    yield

    logger.info("SPAP local server shutting down")


def create_app(
    settings: Optional[Settings] = None,
    request_handler: Optional[RequestHandler] = None,
) -> FastAPI:
    """
    Application factory.

    Tests pass in settings and a handler wired to mock storage; the
    module-level app uses the environment.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="SPAP",
        version=__version__,
        description="Single-Page-Application Publisher, local development server.",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.request_handler = request_handler

    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )

    app.include_router(
        spa.router,
        prefix=settings.route_resource.replace("/{proxy+}", ""),
        tags=["SPA"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """
        Catch-all exception handler.

        Mirrors what API Gateway does when the function fails: a generic
        error, with details only in the server log.
        """
        logger.error(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
            exc_info=exc,
        )

        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "spap.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
