"""Application services: expression parsing, per-kind strategies, resolver facade."""

from linkresolver.application.services.display_name_resolver import (
    DisplayNameResolver,
)
from linkresolver.application.services.expression_parser import parse_expression
from linkresolver.application.services.link_resolver import LinkResolver
from linkresolver.application.services.link_url_resolver import LinkUrlResolver

__all__ = [
    "DisplayNameResolver",
    "LinkResolver",
    "LinkUrlResolver",
    "parse_expression",
]
