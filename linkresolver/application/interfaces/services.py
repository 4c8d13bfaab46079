"""Service interfaces (ports) for the application layer.

Protocols define contracts for the resolver's collaborators (DIP).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from linkresolver.domain.value_objects import CacheKey, ResolutionResult


# Media URL service interface
class IMediaUrlService(Protocol):
    """Protocol for building public URLs of pictures."""

    async def get_url(self, picture_id: int) -> str:
        """Return the URL of the picture (fallback URL when unknown)."""


# Router interface
class IRouter(Protocol):
    """Protocol for building URLs from named routes."""

    def route_url(self, route_name: str, **values: Any) -> str:
        """Return the URL for route_name with values filled in (e.g. se_name)."""


# Virtual path expander interface
class IPathExpander(Protocol):
    """Protocol for expanding app-relative virtual paths ('~/about')."""

    def to_absolute(self, virtual_path: str) -> str:
        """Return the absolute application path for virtual_path."""


# Working language interface
class IWorkingLanguageProvider(Protocol):
    """Protocol for the caller's current working language."""

    def current_language_id(self) -> int:
        """Return a concrete (positive) language id."""


# Cache store interface
class ICacheStore(Protocol):
    """Protocol for resolver memoization with store-owned expiry.

    Concurrent misses for one key may both run compute (no single-flight).
    """

    async def get_or_compute(
        self,
        key: CacheKey,
        compute: Callable[[], Awaitable[ResolutionResult]],
    ) -> ResolutionResult:
        """Return the cached result for key, computing and storing it on a miss."""

    async def clear(self) -> int:
        """Drop all resolver entries. Returns the number of entries removed."""


# Link resolver interface
class ILinkResolver(Protocol):
    """Protocol for the public resolver facade."""

    async def get_display_name(
        self, expression: str, language_id: int = 0
    ) -> ResolutionResult:
        """Resolve expression to a display name (language 0 = working language)."""

    async def get_link(
        self, expression: str, language_id: int = 0
    ) -> ResolutionResult:
        """Resolve expression to a URL (language 0 = working language)."""
