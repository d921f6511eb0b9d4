"""
FastAPI dependency injection.

The local server shares one RequestHandler for its whole lifetime, the
same way a warm Lambda execution environment does. It lives on
app.state so tests can hand create_app a handler wired to mock storage.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..config.settings import Settings
from ..core.handler import RequestHandler


def get_spa_handler(request: Request) -> RequestHandler:
    """Provide the RequestHandler built at startup."""
    return request.app.state.request_handler


def get_app_settings(request: Request) -> Settings:
    """Provide the settings the app was created with."""
    return request.app.state.settings


# ---------------------------------------------------------------------------
# Convenience Type Aliases
# ---------------------------------------------------------------------------

RequestHandlerDep = Annotated[RequestHandler, Depends(get_spa_handler)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
