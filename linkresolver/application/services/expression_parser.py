"""Link expression parser.

Turns a raw expression ("product:42", "url:~/about") into a typed
ParsedExpression. Parsing never fails: anything that is not a well-formed
entity reference or a url/file expression degrades to a URL token.
"""

from __future__ import annotations

import re

from linkresolver.core.constants import MAX_ENTITY_ID
from linkresolver.domain.enums import ExpressionKind
from linkresolver.domain.value_objects import ParsedExpression

# Surrounding whitespace and one leading "+" are accepted; digits must be
# ASCII (no "-", underscores or non-ASCII numerals).
_ENTITY_ID_RE = re.compile(r"\+?[0-9]+")


def _parse_entity_id(value: str) -> int | None:
    """Return value as a positive 32-bit id, or None."""
    value = value.strip()
    if not _ENTITY_ID_RE.fullmatch(value):
        return None
    entity_id = int(value)
    if entity_id <= 0 or entity_id > MAX_ENTITY_ID:
        return None
    return entity_id


def parse_expression(raw: str | None) -> ParsedExpression:
    """Parse a link expression into kind and payload.

    Entity kinds with a zero, negative or non-numeric id fall back to a
    URL token carrying the full original string, not just the value part.

    Args:
        raw: Raw expression as stored in content (may be None or blank).

    Returns:
        ParsedExpression; kind URL with payload '' for blank input.
    """
    if raw is None or not raw.strip():
        return ParsedExpression(ExpressionKind.URL, "")

    prefix, sep, value = raw.partition(":")
    kind = ExpressionKind.from_prefix(prefix.strip()) if sep else None
    if kind is None:
        return ParsedExpression(ExpressionKind.URL, raw)

    if not kind.is_entity:
        return ParsedExpression(kind, value)

    entity_id = _parse_entity_id(value)
    if entity_id is None:
        return ParsedExpression(ExpressionKind.URL, raw)
    return ParsedExpression(kind, entity_id)
