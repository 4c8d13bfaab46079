"""Domain value objects for the link resolver.

Value objects are immutable types with self-validation. A parsed
expression and its resolution result are transient; cache keys are
hashable so the in-memory store can use them directly.
"""

from dataclasses import dataclass
from typing import Any

from linkresolver.domain.enums import ExpressionKind, LookupOperation
from linkresolver.domain.exceptions import ValidationException


def _validate_payload(kind: ExpressionKind, value: int | str) -> None:
    """Entity kinds carry a positive int id; URL and FILE carry a str."""
    if kind.is_entity:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationException(
                f"{kind.entity_name} expressions require an integer id", field="value"
            )
        if value <= 0:
            raise ValidationException(
                f"{kind.entity_name} id must be positive", field="value"
            )
    elif not isinstance(value, str):
        raise ValidationException(
            f"{kind.entity_name} expressions require a string value", field="value"
        )


@dataclass(frozen=True)
class ParsedExpression:
    """Typed token produced by the expression parser (kind + payload)."""

    kind: ExpressionKind
    value: int | str

    def __post_init__(self) -> None:
        _validate_payload(self.kind, self.value)


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a display-name or link lookup.

    ``resolved`` is the display name or URL; an empty string means
    nothing was found and is never replaced by None.
    """

    kind: ExpressionKind
    value: int | str
    resolved: str = ""

    def __post_init__(self) -> None:
        _validate_payload(self.kind, self.value)
        if not isinstance(self.resolved, str):
            raise ValidationException("resolved must be a string", field="resolved")

    @classmethod
    def from_parsed(cls, parsed: ParsedExpression, resolved: str = "") -> "ResolutionResult":
        return cls(kind=parsed.kind, value=parsed.value, resolved=resolved)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON cache backends."""
        return {"kind": self.kind.value, "value": self.value, "resolved": self.resolved}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResolutionResult":
        """Rebuild from to_dict() output. Entity ids are restored as int.

        Raises:
            ValidationException: If kind is unknown or the payload is invalid.
        """
        try:
            kind = ExpressionKind(data["kind"])
        except (KeyError, ValueError) as e:
            raise ValidationException(f"Invalid cached kind: {e}", field="kind") from e
        value = data.get("value", "")
        if kind.is_entity and isinstance(value, str) and value.isdigit():
            value = int(value)
        return cls(kind=kind, value=value, resolved=data.get("resolved") or "")


@dataclass(frozen=True)
class CacheKey:
    """Composite memoization key: (operation, raw expression, concrete language id).

    The language id is always resolved before the key is built; the
    sentinel 0 ("current language") never appears here.
    """

    operation: LookupOperation
    expression: str
    language_id: int

    def __post_init__(self) -> None:
        if self.language_id <= 0:
            raise ValidationException(
                "Cache key requires a resolved language id", field="language_id"
            )
