"""Domain layer: enums, value objects, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from linkresolver.domain.enums import ExpressionKind, LookupOperation
from linkresolver.domain.exceptions import (
    LinkResolverException,
    RouteNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from linkresolver.domain.value_objects import (
    CacheKey,
    ParsedExpression,
    ResolutionResult,
)

__all__ = [
    # Enums
    "ExpressionKind",
    "LookupOperation",
    # Exceptions
    "LinkResolverException",
    "RouteNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "CacheKey",
    "ParsedExpression",
    "ResolutionResult",
]
