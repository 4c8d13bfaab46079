"""Localized property lookups (implements ILocalizationStore)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkresolver.infrastructure.persistence.models import LocalizedProperty


class LocalizedPropertyRepository:
    """Reads translated entity fields keyed by (language, entity, key group, key)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_localized_value(
        self,
        language_id: int,
        entity_id: int,
        entity_name: str,
        field_name: str,
    ) -> str:
        """Return the localized value, or '' when there is no translation."""
        query = (
            select(LocalizedProperty.locale_value)
            .where(
                LocalizedProperty.language_id == language_id,
                LocalizedProperty.entity_id == entity_id,
                LocalizedProperty.locale_key_group == entity_name,
                LocalizedProperty.locale_key == field_name,
            )
            .order_by(LocalizedProperty.id.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none() or ""
