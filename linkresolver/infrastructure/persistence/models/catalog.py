"""Catalog ORM models: Product, Category, Manufacturer.

Only the columns the resolver reads are mapped; the tables are owned by
the catalog service.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.persistence.models.mixins import IntIdMixin


class Product(IntIdMixin, Base):
    """Catalog product. Table: product."""

    __tablename__ = "product"

    name: Mapped[str] = mapped_column(String(400), nullable=False, default="")


class Category(IntIdMixin, Base):
    """Catalog category. Table: category."""

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(400), nullable=False, default="")


class Manufacturer(IntIdMixin, Base):
    """Catalog manufacturer (brand). Table: manufacturer."""

    __tablename__ = "manufacturer"

    name: Mapped[str] = mapped_column(String(400), nullable=False, default="")
