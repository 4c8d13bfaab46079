"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes
use dependencies from linkresolver.api.v1.dependencies.
"""

from fastapi import APIRouter

from linkresolver.api.v1.endpoints import health, links

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(links.router, prefix="/links", tags=["links"])
