"""URL slug lookups (implements ISlugStore)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkresolver.infrastructure.persistence.models import UrlRecord


class UrlRecordRepository:
    """Reads the active slug of an entity for one language (0 = neutral)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_active_slug(
        self, entity_id: int, entity_name: str, language_id: int
    ) -> str:
        """Return the newest active slug, or '' when none exists.

        Only the slug column is selected.
        """
        query = (
            select(UrlRecord.slug)
            .where(
                UrlRecord.entity_id == entity_id,
                UrlRecord.entity_name == entity_name,
                UrlRecord.language_id == language_id,
                UrlRecord.is_active.is_(True),
            )
            .order_by(UrlRecord.id.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none() or ""
