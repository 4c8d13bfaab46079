"""FastAPI dependencies: per-request LinkResolver composition.

Stores are bound to the request's DB session; the cache store is the
application-wide one created in the lifespan.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from linkresolver.application.interfaces import ICacheStore, ILinkResolver
from linkresolver.application.services import (
    DisplayNameResolver,
    LinkResolver,
    LinkUrlResolver,
)
from linkresolver.core.config import Settings, get_settings
from linkresolver.core.language_context import ContextLanguageProvider
from linkresolver.infrastructure.cache import InMemoryCacheStore
from linkresolver.infrastructure.external.media import PictureUrlService
from linkresolver.infrastructure.persistence.database import get_db
from linkresolver.infrastructure.persistence.repositories import (
    EntityFieldRepository,
    LocalizedPropertyRepository,
    UrlRecordRepository,
)
from linkresolver.infrastructure.routing import RouteTable, VirtualPathExpander


def get_cache_store(
    request: Request, settings: Annotated[Settings, Depends(get_settings)]
) -> ICacheStore:
    """Return the app cache store; create an in-memory one if the lifespan did not run."""
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        cache = InMemoryCacheStore(
            ttl=settings.link_cache_ttl, max_entries=settings.link_cache_max_entries
        )
        request.app.state.cache = cache
    return cache


def build_link_resolver(
    db: AsyncSession, cache: ICacheStore, settings: Settings
) -> LinkResolver:
    """Compose a LinkResolver from SQL stores, routing and the given cache."""
    path_expander = VirtualPathExpander(settings.app_base_path)
    display_names = DisplayNameResolver(
        entity_store=EntityFieldRepository(db),
        localization_store=LocalizedPropertyRepository(db),
        path_expander=path_expander,
    )
    links = LinkUrlResolver(
        slug_store=UrlRecordRepository(db),
        media_url_service=PictureUrlService(
            db,
            media_base_url=settings.media_base_url,
            fallback_url=settings.media_fallback_url,
        ),
        router=RouteTable(settings.route_templates, settings.app_base_path),
        path_expander=path_expander,
    )
    return LinkResolver(
        display_names,
        links,
        cache,
        ContextLanguageProvider(settings.default_language_id),
        swallow_collaborator_errors=settings.swallow_collaborator_errors,
    )


async def get_link_resolver(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[ICacheStore, Depends(get_cache_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ILinkResolver:
    """Request-scoped resolver dependency."""
    return build_link_resolver(db, cache, settings)
