"""Domain value objects (immutable, self-validating)."""

from linkresolver.domain.value_objects.core import (
    CacheKey,
    ParsedExpression,
    ResolutionResult,
)

__all__ = [
    "CacheKey",
    "ParsedExpression",
    "ResolutionResult",
]
