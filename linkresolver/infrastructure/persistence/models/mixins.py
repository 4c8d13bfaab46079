"""SQLAlchemy mixins for common model patterns (DRY)."""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class IntIdMixin:
    """Mixin for models keyed by an auto-increment integer id (entity ids in expressions)."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)
