"""Link expression resolver.

Resolves serialized link expressions ('product:42', 'topic:7',
'url:~/about') to display names and URLs, memoized per language.

Usage:
    from linkresolver import LinkResolver, parse_expression

    result = await resolver.get_link("category:10", language_id=2)
    result.kind, result.value, result.resolved
"""

from linkresolver.application.services import (
    DisplayNameResolver,
    LinkResolver,
    LinkUrlResolver,
    parse_expression,
)
from linkresolver.domain import (
    CacheKey,
    ExpressionKind,
    LookupOperation,
    ParsedExpression,
    ResolutionResult,
)

__all__ = [
    "CacheKey",
    "DisplayNameResolver",
    "ExpressionKind",
    "LinkResolver",
    "LinkUrlResolver",
    "LookupOperation",
    "ParsedExpression",
    "ResolutionResult",
    "parse_expression",
]
