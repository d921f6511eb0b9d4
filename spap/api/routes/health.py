"""
Health check endpoint.

Liveness only: reports that the process is up and where it is reading
contents from. It never touches the object store.
"""

from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel

from ... import __version__
from ..dependencies import RequestHandlerDep, SettingsDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    details: dict[str, Any] = {}


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
    description="Returns 200 if the service is running. Does not check storage.",
)
async def health_check(settings: SettingsDep, handler: RequestHandlerDep) -> HealthResponse:
    location = handler.reader.location
    return HealthResponse(
        status="ok",
        version=__version__,
        details={
            "bucket": location.bucket,
            "prefix": location.prefix,
            "rewrite404": handler.rewrite404,
            "mock_mode": settings.storage_mock_mode,
        }
    )
