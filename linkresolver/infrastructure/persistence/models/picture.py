"""Picture ORM model. Media referenced by 'media:<id>' expressions."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.persistence.models.mixins import IntIdMixin


class Picture(IntIdMixin, Base):
    """Stored picture. Table: picture. seo_filename has no extension."""

    __tablename__ = "picture"

    seo_filename: Mapped[str | None] = mapped_column(String(300), nullable=True)
    mime_type: Mapped[str] = mapped_column(String(40), nullable=False)
