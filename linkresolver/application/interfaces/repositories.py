"""Repository interfaces (ports) for the stores the resolver reads from.

All lookups are read-only, by primary key or by (entity, language).
An empty string means "not found" (missing row, NULL, or blank value).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from linkresolver.domain.enums import ExpressionKind


class IEntityStore(Protocol):
    """Protocol for reading a single scalar field of a catalog/content entity."""

    async def get_field(
        self, kind: ExpressionKind, entity_id: int, field_name: str
    ) -> str:
        """Return the field value of the entity of the given kind, or ''."""


class ILocalizationStore(Protocol):
    """Protocol for localized entity properties."""

    async def get_localized_value(
        self,
        language_id: int,
        entity_id: int,
        entity_name: str,
        field_name: str,
    ) -> str:
        """Return the localized value for (language, entity, field), or ''."""


class ISlugStore(Protocol):
    """Protocol for active URL slugs (URL records)."""

    async def get_active_slug(
        self, entity_id: int, entity_name: str, language_id: int
    ) -> str:
        """Return the active slug for the entity in the language, or ''.

        language_id 0 selects the language-neutral slug.
        """
