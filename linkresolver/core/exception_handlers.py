"""FastAPI exception handlers.

Domain exceptions carry their own error code and details; this module
only decides the HTTP status and the JSON envelope
({"error", "message", "details"}) shared by every error response.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from linkresolver.core.config import get_settings
from linkresolver.domain.exceptions import (
    LinkResolverException,
    RouteNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Most specific class wins (looked up along the MRO). A missing route is a
# deployment error, not a client error.
_STATUS_BY_EXCEPTION: dict[type[LinkResolverException], int] = {
    ValidationException: 400,
    RouteNotFoundException: 500,
    SqlNotConfiguredException: 503,
    LinkResolverException: 400,
}


def _error_body(error: str, message: Any, details: Any = None) -> dict[str, Any]:
    return {"error": error, "message": message, "details": details or {}}


def status_for(exc: LinkResolverException) -> int:
    """Return the HTTP status for a domain exception."""
    for cls in type(exc).__mro__:
        if cls in _STATUS_BY_EXCEPTION:
            return _STATUS_BY_EXCEPTION[cls]
    return 400


async def _link_resolver_exception_handler(
    request: Request, exc: LinkResolverException
) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error(
            "%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.message
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 listing each invalid parameter as {field, message}."""
    fields = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "query"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=_error_body("VALIDATION_ERROR", "Request validation failed", {"fields": fields}),
    )


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(status_code=500, content=_error_body("INTERNAL_ERROR", message))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to app (call once from create_app)."""
    app.add_exception_handler(LinkResolverException, _link_resolver_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
