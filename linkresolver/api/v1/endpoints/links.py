"""Link resolution endpoints: display names, URLs, and cache invalidation."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from linkresolver.api.v1.dependencies import get_cache_store, get_link_resolver
from linkresolver.application.interfaces import ICacheStore, ILinkResolver
from linkresolver.schemas.link import CacheClearResponse, LinkResolutionResponse

router = APIRouter()

ExpressionQuery = Annotated[
    str,
    Query(max_length=2048, description="Link expression, e.g. 'product:42' or 'url:~/about'"),
]
LanguageQuery = Annotated[
    int, Query(ge=0, description="Language id; 0 uses the working language")
]


@router.get("/display-name", response_model=LinkResolutionResponse)
async def get_display_name(
    resolver: Annotated[ILinkResolver, Depends(get_link_resolver)],
    expression: ExpressionQuery,
    language_id: LanguageQuery = 0,
) -> LinkResolutionResponse:
    """Resolve a link expression to its display name."""
    result = await resolver.get_display_name(expression, language_id)
    return LinkResolutionResponse.from_result(result, language_id)


@router.get("/url", response_model=LinkResolutionResponse)
async def get_link(
    resolver: Annotated[ILinkResolver, Depends(get_link_resolver)],
    expression: ExpressionQuery,
    language_id: LanguageQuery = 0,
) -> LinkResolutionResponse:
    """Resolve a link expression to a URL."""
    result = await resolver.get_link(expression, language_id)
    return LinkResolutionResponse.from_result(result, language_id)


@router.delete("/cache", response_model=CacheClearResponse)
async def clear_cache(
    cache: Annotated[ICacheStore, Depends(get_cache_store)],
) -> CacheClearResponse:
    """Drop all memoized display names and links."""
    removed = await cache.clear()
    return CacheClearResponse(removed=removed)
