"""Link resolver facade (implements ILinkResolver).

Orchestrates one lookup: resolve the working language, build the cache
key, and on a miss parse the expression and run the per-kind strategy.
Callers get the full ResolutionResult (kind, original payload, resolved
text) so they can inspect both the match type and the computed value.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from linkresolver.application.interfaces import ICacheStore, IWorkingLanguageProvider
from linkresolver.application.services.display_name_resolver import (
    DisplayNameResolver,
)
from linkresolver.application.services.expression_parser import parse_expression
from linkresolver.application.services.link_url_resolver import LinkUrlResolver
from linkresolver.core.constants import CURRENT_LANGUAGE_SENTINEL
from linkresolver.domain.enums import LookupOperation
from linkresolver.domain.value_objects import (
    CacheKey,
    ParsedExpression,
    ResolutionResult,
)
from linkresolver.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

_Strategy = Callable[[ParsedExpression, int], Awaitable[str]]


class LinkResolver:
    """Resolves link expressions to display names and URLs, memoized per language.

    Malformed expressions never raise; the worst case is an empty
    ``resolved``. Store failures are logged and yield an uncached empty
    result unless swallow_collaborator_errors is False, in which case
    they propagate (and are not cached either).
    """

    def __init__(
        self,
        display_names: DisplayNameResolver,
        links: LinkUrlResolver,
        cache: ICacheStore,
        language_provider: IWorkingLanguageProvider,
        *,
        swallow_collaborator_errors: bool = True,
    ) -> None:
        self.display_names = display_names
        self.links = links
        self.cache = cache
        self.language_provider = language_provider
        self.swallow_collaborator_errors = swallow_collaborator_errors

    @traced("link_resolver.get_display_name")
    async def get_display_name(
        self, expression: str, language_id: int = CURRENT_LANGUAGE_SENTINEL
    ) -> ResolutionResult:
        """Resolve expression to a display name.

        Args:
            expression: Raw link expression (e.g. 'topic:7').
            language_id: Language id; 0 means the caller's working language.

        Returns:
            ResolutionResult with the display name in ``resolved``.
        """
        return await self._resolve(
            LookupOperation.NAME, expression, language_id, self.display_names.resolve
        )

    @traced("link_resolver.get_link")
    async def get_link(
        self, expression: str, language_id: int = CURRENT_LANGUAGE_SENTINEL
    ) -> ResolutionResult:
        """Resolve expression to a URL.

        Args:
            expression: Raw link expression (e.g. 'category:10').
            language_id: Language id; 0 means the caller's working language.

        Returns:
            ResolutionResult with the URL in ``resolved`` ('' if unresolvable).
        """
        return await self._resolve(
            LookupOperation.LINK, expression, language_id, self.links.resolve
        )

    async def clear_cache(self) -> int:
        """Drop all memoized results. Returns the number of entries removed."""
        return await self.cache.clear()

    def _resolve_language(self, language_id: int) -> int:
        # Negative ids are treated like the sentinel so keys stay concrete.
        if language_id is None or language_id <= CURRENT_LANGUAGE_SENTINEL:
            return self.language_provider.current_language_id()
        return language_id

    async def _resolve(
        self,
        operation: LookupOperation,
        expression: str,
        language_id: int,
        strategy: _Strategy,
    ) -> ResolutionResult:
        expression = expression or ""
        language_id = self._resolve_language(language_id)

        async def compute() -> ResolutionResult:
            parsed = parse_expression(expression)
            resolved = await strategy(parsed, language_id)
            return ResolutionResult.from_parsed(parsed, resolved)

        try:
            key = CacheKey(operation, expression, language_id)
            result = await self.cache.get_or_compute(key, compute)
        except Exception:
            if not self.swallow_collaborator_errors:
                raise
            logger.exception(
                "Link %s lookup failed for %r (language %s); returning empty result",
                operation.value,
                expression,
                language_id,
            )
            result = ResolutionResult.from_parsed(parse_expression(expression))
        add_span_attributes(kind=result.kind.value, language_id=language_id)
        return result
