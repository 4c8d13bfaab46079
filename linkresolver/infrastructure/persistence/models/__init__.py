"""Persistence models: ORM entities read by the resolver stores."""

from linkresolver.infrastructure.persistence.models.catalog import (
    Category,
    Manufacturer,
    Product,
)
from linkresolver.infrastructure.persistence.models.localized_property import (
    LocalizedProperty,
)
from linkresolver.infrastructure.persistence.models.mixins import IntIdMixin
from linkresolver.infrastructure.persistence.models.picture import Picture
from linkresolver.infrastructure.persistence.models.topic import Topic
from linkresolver.infrastructure.persistence.models.url_record import UrlRecord

__all__ = [
    "Category",
    "IntIdMixin",
    "LocalizedProperty",
    "Manufacturer",
    "Picture",
    "Product",
    "Topic",
    "UrlRecord",
]
