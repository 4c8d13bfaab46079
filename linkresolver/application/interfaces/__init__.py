"""Application interfaces (ports): store and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from linkresolver.infrastructure.
"""

from linkresolver.application.interfaces.repositories import (
    IEntityStore,
    ILocalizationStore,
    ISlugStore,
)
from linkresolver.application.interfaces.services import (
    ICacheStore,
    ILinkResolver,
    IMediaUrlService,
    IPathExpander,
    IRouter,
    IWorkingLanguageProvider,
)

__all__ = [
    "ICacheStore",
    "IEntityStore",
    "ILinkResolver",
    "ILocalizationStore",
    "IMediaUrlService",
    "IPathExpander",
    "IRouter",
    "ISlugStore",
    "IWorkingLanguageProvider",
]
