"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See linkresolver.core.lifespan and
linkresolver.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from linkresolver.api.v1 import api_router
from linkresolver.core.config import get_settings
from linkresolver.core.exception_handlers import register_exception_handlers
from linkresolver.core.lifespan import create_lifespan
from linkresolver.middleware import LanguageContextMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)
    app.add_middleware(
        LanguageContextMiddleware, header_name=settings.language_header_name
    )
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
