"""Cache key builders. Single place for the Redis key format.

The raw expression is the last component, after fixed-format operation
and language components, so expressions containing the separator can
never make a name key collide with a link key or another language.
"""

from linkresolver.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_LINK_RESOLVER
from linkresolver.domain.value_objects import CacheKey


def link_resolver_key(key: CacheKey) -> str:
    """Redis key for a resolver result (operation + language + expression)."""
    return CACHE_KEY_SEP.join(
        (
            CACHE_PREFIX_LINK_RESOLVER,
            key.operation.value,
            str(key.language_id),
            key.expression,
        )
    )


def link_resolver_pattern() -> str:
    """SCAN match pattern covering every resolver entry."""
    return f"{CACHE_PREFIX_LINK_RESOLVER}{CACHE_KEY_SEP}*"
