"""Domain enumerations for the link resolver.

Enums represent the closed set of link expression kinds and the two
lookup operations the resolver memoizes.
"""

from enum import Enum


class ExpressionKind(str, Enum):
    """Kind of target a link expression points at.

    Values are the lowercase prefixes used in expressions
    (e.g. ``product:42``). Unknown or malformed prefixes degrade to URL.
    """

    PRODUCT = "product"
    CATEGORY = "category"
    MANUFACTURER = "manufacturer"
    TOPIC = "topic"
    MEDIA = "media"
    URL = "url"
    FILE = "file"

    @classmethod
    def from_prefix(cls, prefix: str) -> "ExpressionKind | None":
        """Return the kind matching prefix (case-insensitive), or None."""
        try:
            return cls(prefix.lower())
        except ValueError:
            return None

    @property
    def entity_name(self) -> str:
        """PascalCase entity name (e.g. 'Product').

        Used as localization key group, URL-record entity name and route name.
        """
        return self.name.title()

    @property
    def is_entity(self) -> bool:
        """Return True when expressions of this kind carry an entity id."""
        return self not in (ExpressionKind.URL, ExpressionKind.FILE)


class LookupOperation(str, Enum):
    """Resolver operation; part of every cache key."""

    NAME = "name"
    LINK = "link"
