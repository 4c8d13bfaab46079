"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    cache_backend: str | None = Field(
        default=None, description="Resolver cache store in use (e.g. RedisCacheStore)"
    )
