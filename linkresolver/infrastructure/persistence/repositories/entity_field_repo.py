"""Entity field lookups (implements IEntityStore).

Fetches one scalar column of a catalog/content entity by primary key,
without loading the whole row.
"""

from __future__ import annotations

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from linkresolver.domain.enums import ExpressionKind
from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.persistence.models import (
    Category,
    Manufacturer,
    Picture,
    Product,
    Topic,
)

# Entity table per expression kind (media expressions point at pictures).
ENTITY_MODELS: dict[ExpressionKind, type[Base]] = {
    ExpressionKind.PRODUCT: Product,
    ExpressionKind.CATEGORY: Category,
    ExpressionKind.MANUFACTURER: Manufacturer,
    ExpressionKind.TOPIC: Topic,
    ExpressionKind.MEDIA: Picture,
}


class EntityFieldRepository:
    """Reads single entity fields by id for the display-name strategies."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_field(
        self, kind: ExpressionKind, entity_id: int, field_name: str
    ) -> str:
        """Return the field value, or '' when the row is missing or the value is NULL.

        Raises:
            ValueError: If kind has no entity table or field_name is not a mapped column.
        """
        model = ENTITY_MODELS.get(kind)
        if model is None:
            raise ValueError(f"Expression kind {kind.value!r} has no entity table")
        if field_name not in sa_inspect(model).columns:
            raise ValueError(f"{model.__name__} has no column {field_name!r}")
        column = getattr(model, field_name)
        model_id = getattr(model, "id")
        result = await self.db.execute(select(column).where(model_id == entity_id))
        value = result.scalar_one_or_none()
        return "" if value is None else str(value)
