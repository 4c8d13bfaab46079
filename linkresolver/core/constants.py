"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure and default routes.
"""

# Cache key prefix for all resolver entries (used with :operation:language_id:expression)
CACHE_PREFIX_LINK_RESOLVER = "linkresolver"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Virtual-path marker expanded to the application base path
VIRTUAL_PATH_MARKER = "~"

# Language id meaning "the caller's current working language"
CURRENT_LANGUAGE_SENTINEL = 0

# Language id of language-neutral URL slugs
NEUTRAL_LANGUAGE_ID = 0

# Largest entity id accepted by the parser (32-bit signed primary keys)
MAX_ENTITY_ID = 2**31 - 1

# Route templates relative to app_base_path; {se_name} is the URL slug.
DEFAULT_ROUTE_TEMPLATES: dict[str, str] = {
    "Product": "{se_name}",
    "Category": "{se_name}",
    "Manufacturer": "{se_name}",
    "Topic": "t/{se_name}",
}
