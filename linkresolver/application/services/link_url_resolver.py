"""Link strategies, one per expression kind.

Catalog and content entities link through their active URL slug: the
slug for the requested language is preferred, the language-neutral slug
is the fallback, and no slug means no link.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from linkresolver.application.interfaces import (
    IMediaUrlService,
    IPathExpander,
    IRouter,
    ISlugStore,
)
from linkresolver.application.services.virtual_path import expand_virtual_url
from linkresolver.core.constants import NEUTRAL_LANGUAGE_ID
from linkresolver.domain.enums import ExpressionKind
from linkresolver.domain.value_objects import ParsedExpression

_Strategy = Callable[[ParsedExpression, int], Awaitable[str]]


class LinkUrlResolver:
    """Resolves a parsed expression to a navigable URL."""

    def __init__(
        self,
        slug_store: ISlugStore,
        media_url_service: IMediaUrlService,
        router: IRouter,
        path_expander: IPathExpander,
    ) -> None:
        self.slug_store = slug_store
        self.media_url_service = media_url_service
        self.router = router
        self.path_expander = path_expander
        self._strategies: dict[ExpressionKind, _Strategy] = {
            ExpressionKind.PRODUCT: self._resolve_slugged_entity,
            ExpressionKind.CATEGORY: self._resolve_slugged_entity,
            ExpressionKind.MANUFACTURER: self._resolve_slugged_entity,
            ExpressionKind.TOPIC: self._resolve_slugged_entity,
            ExpressionKind.MEDIA: self._resolve_media,
            ExpressionKind.URL: self._resolve_url,
            ExpressionKind.FILE: self._resolve_file,
        }
        missing = set(ExpressionKind) - self._strategies.keys()
        if missing:
            raise RuntimeError(f"No link strategy for: {sorted(missing)}")

    async def resolve(self, parsed: ParsedExpression, language_id: int) -> str:
        """Return the URL for parsed in language_id ('' if unresolvable)."""
        return await self._strategies[parsed.kind](parsed, language_id)

    async def _slug(
        self, parsed: ParsedExpression, language_id: int
    ) -> str:
        slug = await self.slug_store.get_active_slug(
            int(parsed.value), parsed.kind.entity_name, language_id
        )
        return slug or ""

    async def _resolve_slugged_entity(
        self, parsed: ParsedExpression, language_id: int
    ) -> str:
        slug = await self._slug(parsed, language_id)
        if slug == "" and language_id != NEUTRAL_LANGUAGE_ID:
            slug = await self._slug(parsed, NEUTRAL_LANGUAGE_ID)
        if slug == "":
            return ""
        return self.router.route_url(parsed.kind.entity_name, se_name=slug)

    async def _resolve_media(self, parsed: ParsedExpression, language_id: int) -> str:
        url = await self.media_url_service.get_url(int(parsed.value))
        return url or ""

    async def _resolve_url(self, parsed: ParsedExpression, language_id: int) -> str:
        return expand_virtual_url(str(parsed.value), self.path_expander)

    async def _resolve_file(self, parsed: ParsedExpression, language_id: int) -> str:
        return str(parsed.value)
