"""Health check endpoint. Used for liveness probes."""

from fastapi import APIRouter, Request

from linkresolver.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok status and the resolver cache backend in use."""
    cache = getattr(request.app.state, "cache", None)
    return HealthResponse(cache_backend=type(cache).__name__ if cache is not None else None)
