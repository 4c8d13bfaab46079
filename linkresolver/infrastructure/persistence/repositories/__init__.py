"""Read-only SQLAlchemy stores backing the resolver collaborators."""

from linkresolver.infrastructure.persistence.repositories.entity_field_repo import (
    ENTITY_MODELS,
    EntityFieldRepository,
)
from linkresolver.infrastructure.persistence.repositories.localized_property_repo import (
    LocalizedPropertyRepository,
)
from linkresolver.infrastructure.persistence.repositories.url_record_repo import (
    UrlRecordRepository,
)

__all__ = [
    "ENTITY_MODELS",
    "EntityFieldRepository",
    "LocalizedPropertyRepository",
    "UrlRecordRepository",
]
