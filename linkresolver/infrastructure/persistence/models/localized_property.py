"""LocalizedProperty ORM model. One translated field value per (entity, language, key)."""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.persistence.models.mixins import IntIdMixin


class LocalizedProperty(IntIdMixin, Base):
    """Localized entity property. Table: localized_property.

    locale_key_group is the entity name ('Product', 'Topic', ...),
    locale_key the field ('Name', 'ShortTitle', 'Title').
    """

    __tablename__ = "localized_property"

    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)
    language_id: Mapped[int] = mapped_column(Integer, nullable=False)
    locale_key_group: Mapped[str] = mapped_column(String(400), nullable=False)
    locale_key: Mapped[str] = mapped_column(String(400), nullable=False)
    locale_value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index(
            "ix_localized_property_lookup",
            "entity_id",
            "locale_key_group",
            "locale_key",
            "language_id",
        ),
    )
