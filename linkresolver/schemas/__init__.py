"""API request/response schemas (Pydantic)."""

from linkresolver.schemas.health import HealthResponse
from linkresolver.schemas.link import CacheClearResponse, LinkResolutionResponse

__all__ = ["CacheClearResponse", "HealthResponse", "LinkResolutionResponse"]
