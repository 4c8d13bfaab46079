"""UrlRecord ORM model. SEO slugs per entity and language (0 = language-neutral)."""

from sqlalchemy import Boolean, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.persistence.models.mixins import IntIdMixin


class UrlRecord(IntIdMixin, Base):
    """URL slug record. Table: url_record.

    Several records may exist per entity/language (history); only active
    ones resolve, the newest winning.
    """

    __tablename__ = "url_record"

    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)
    entity_name: Mapped[str] = mapped_column(String(400), nullable=False)
    slug: Mapped[str] = mapped_column(String(400), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    language_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index(
            "ix_url_record_lookup",
            "entity_id",
            "entity_name",
            "language_id",
            "is_active",
        ),
    )
