"""Topic ORM model. CMS page; display name falls back to system_name."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.persistence.models.mixins import IntIdMixin


class Topic(IntIdMixin, Base):
    """Content topic. Table: topic.

    Titles live in localized_property (ShortTitle, Title); system_name is
    unique and never localized.
    """

    __tablename__ = "topic"

    system_name: Mapped[str] = mapped_column(
        String(400), nullable=False, unique=True, index=True
    )
