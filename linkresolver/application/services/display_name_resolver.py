"""Display-name strategies, one per expression kind.

Entity names prefer the localized value for the requested language and
fall back to the base entity field. Each fallback step runs only when
the previous one returned an empty string.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from linkresolver.application.interfaces import (
    IEntityStore,
    ILocalizationStore,
    IPathExpander,
)
from linkresolver.application.services.virtual_path import expand_virtual_url
from linkresolver.domain.enums import ExpressionKind
from linkresolver.domain.value_objects import ParsedExpression

# Localized property keys (locale_key values in the localization store)
LOCALE_KEY_NAME = "Name"
LOCALE_KEY_SHORT_TITLE = "ShortTitle"
LOCALE_KEY_TITLE = "Title"

# Entity store field names
FIELD_NAME = "name"
FIELD_SYSTEM_NAME = "system_name"
FIELD_SEO_FILENAME = "seo_filename"

_Strategy = Callable[[ParsedExpression, int], Awaitable[str]]


class DisplayNameResolver:
    """Resolves a parsed expression to a human-readable name."""

    def __init__(
        self,
        entity_store: IEntityStore,
        localization_store: ILocalizationStore,
        path_expander: IPathExpander,
    ) -> None:
        self.entity_store = entity_store
        self.localization_store = localization_store
        self.path_expander = path_expander
        self._strategies: dict[ExpressionKind, _Strategy] = {
            ExpressionKind.PRODUCT: self._resolve_named_entity,
            ExpressionKind.CATEGORY: self._resolve_named_entity,
            ExpressionKind.MANUFACTURER: self._resolve_named_entity,
            ExpressionKind.TOPIC: self._resolve_topic,
            ExpressionKind.MEDIA: self._resolve_media,
            ExpressionKind.URL: self._resolve_url,
            ExpressionKind.FILE: self._resolve_file,
        }
        missing = set(ExpressionKind) - self._strategies.keys()
        if missing:
            raise RuntimeError(f"No display-name strategy for: {sorted(missing)}")

    async def resolve(self, parsed: ParsedExpression, language_id: int) -> str:
        """Return the display name for parsed in language_id ('' if none)."""
        return await self._strategies[parsed.kind](parsed, language_id)

    async def _localized(
        self, parsed: ParsedExpression, language_id: int, locale_key: str
    ) -> str:
        value = await self.localization_store.get_localized_value(
            language_id, int(parsed.value), parsed.kind.entity_name, locale_key
        )
        return value or ""

    async def _field(self, parsed: ParsedExpression, field_name: str) -> str:
        value = await self.entity_store.get_field(
            parsed.kind, int(parsed.value), field_name
        )
        return value or ""

    async def _resolve_named_entity(
        self, parsed: ParsedExpression, language_id: int
    ) -> str:
        name = await self._localized(parsed, language_id, LOCALE_KEY_NAME)
        if name == "":
            name = await self._field(parsed, FIELD_NAME)
        return name

    async def _resolve_topic(self, parsed: ParsedExpression, language_id: int) -> str:
        # ShortTitle -> Title -> SystemName
        title = await self._localized(parsed, language_id, LOCALE_KEY_SHORT_TITLE)
        if title == "":
            title = await self._localized(parsed, language_id, LOCALE_KEY_TITLE)
        if title == "":
            title = await self._field(parsed, FIELD_SYSTEM_NAME)
        return title

    async def _resolve_media(self, parsed: ParsedExpression, language_id: int) -> str:
        # Media filenames are not localized.
        return await self._field(parsed, FIELD_SEO_FILENAME)

    async def _resolve_url(self, parsed: ParsedExpression, language_id: int) -> str:
        return expand_virtual_url(str(parsed.value), self.path_expander)

    async def _resolve_file(self, parsed: ParsedExpression, language_id: int) -> str:
        return str(parsed.value)
