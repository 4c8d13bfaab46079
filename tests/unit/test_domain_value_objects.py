"""Tests for domain enums, exceptions and value objects."""

import pytest

from linkresolver.domain.enums import ExpressionKind, LookupOperation
from linkresolver.domain.exceptions import (
    RouteNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from linkresolver.domain.value_objects import (
    CacheKey,
    ParsedExpression,
    ResolutionResult,
)


class TestExpressionKind:
    """Prefix lookup is case-insensitive; url and file are not entity kinds."""

    def test_from_prefix(self) -> None:
        assert ExpressionKind.from_prefix("MeDiA") == ExpressionKind.MEDIA
        assert ExpressionKind.from_prefix("blog") is None
        assert ExpressionKind.from_prefix("") is None

    def test_entity_name(self) -> None:
        assert ExpressionKind.PRODUCT.entity_name == "Product"
        assert ExpressionKind.MANUFACTURER.entity_name == "Manufacturer"
        assert ExpressionKind.TOPIC.entity_name == "Topic"

    def test_is_entity(self) -> None:
        assert ExpressionKind.MEDIA.is_entity
        assert not ExpressionKind.URL.is_entity
        assert not ExpressionKind.FILE.is_entity


class TestParsedExpression:
    """Entity kinds need a positive int id; url/file need a string."""

    def test_valid(self) -> None:
        ParsedExpression(ExpressionKind.PRODUCT, 1)
        ParsedExpression(ExpressionKind.URL, "")
        ParsedExpression(ExpressionKind.FILE, "a.pdf")

    def test_entity_requires_int(self) -> None:
        with pytest.raises(ValidationException, match="integer id"):
            ParsedExpression(ExpressionKind.PRODUCT, "42")
        with pytest.raises(ValidationException, match="integer id"):
            ParsedExpression(ExpressionKind.PRODUCT, True)

    def test_entity_requires_positive_id(self) -> None:
        with pytest.raises(ValidationException, match="positive"):
            ParsedExpression(ExpressionKind.TOPIC, 0)

    def test_url_requires_str(self) -> None:
        with pytest.raises(ValidationException, match="string"):
            ParsedExpression(ExpressionKind.URL, 5)

    def test_frozen(self) -> None:
        parsed = ParsedExpression(ExpressionKind.MEDIA, 5)
        with pytest.raises(AttributeError):
            parsed.value = 6  # type: ignore[misc]


class TestResolutionResult:
    """resolved is always a string and survives the JSON dict form."""

    def test_from_parsed_defaults_to_empty(self) -> None:
        result = ResolutionResult.from_parsed(
            ParsedExpression(ExpressionKind.CATEGORY, 10)
        )
        assert result == ResolutionResult(ExpressionKind.CATEGORY, 10, "")

    def test_resolved_must_be_str(self) -> None:
        with pytest.raises(ValidationException, match="resolved"):
            ResolutionResult(ExpressionKind.URL, "", None)  # type: ignore[arg-type]

    def test_dict_form(self) -> None:
        result = ResolutionResult(ExpressionKind.TOPIC, 7, "About Us")
        assert result.to_dict() == {"kind": "topic", "value": 7, "resolved": "About Us"}
        assert ResolutionResult.from_dict(result.to_dict()) == result

    def test_from_dict_restores_int_id(self) -> None:
        restored = ResolutionResult.from_dict(
            {"kind": "product", "value": "42", "resolved": "Tent"}
        )
        assert restored.value == 42

    def test_from_dict_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValidationException, match="kind"):
            ResolutionResult.from_dict({"kind": "blog", "value": "x"})
        with pytest.raises(ValidationException, match="kind"):
            ResolutionResult.from_dict({"value": "x"})

    def test_from_dict_missing_resolved_is_empty(self) -> None:
        restored = ResolutionResult.from_dict({"kind": "url", "value": "x", "resolved": None})
        assert restored.resolved == ""


class TestCacheKey:
    """Keys differ by operation, expression and a resolved language above zero."""

    def test_hashable_and_distinct_per_operation(self) -> None:
        name_key = CacheKey(LookupOperation.NAME, "product:1", 1)
        link_key = CacheKey(LookupOperation.LINK, "product:1", 1)
        assert name_key != link_key
        assert len({name_key, link_key, CacheKey(LookupOperation.NAME, "product:1", 1)}) == 2

    def test_distinct_per_language(self) -> None:
        assert CacheKey(LookupOperation.NAME, "x", 1) != CacheKey(LookupOperation.NAME, "x", 2)

    def test_requires_resolved_language(self) -> None:
        with pytest.raises(ValidationException, match="language"):
            CacheKey(LookupOperation.NAME, "product:1", 0)


class TestExceptions:
    """Domain exceptions carry a stable error code and a JSON-ready body."""

    def test_validation_to_dict(self) -> None:
        exc = ValidationException("bad", field="value")
        assert exc.to_dict() == {
            "error": "VALIDATION_ERROR",
            "message": "bad",
            "details": {"field": "value"},
        }

    def test_route_not_found(self) -> None:
        exc = RouteNotFoundException("Blog")
        assert exc.error_code == "ROUTE_NOT_FOUND"
        assert "Blog" in exc.message

    def test_sql_not_configured(self) -> None:
        assert SqlNotConfiguredException().error_code == "SQL_NOT_CONFIGURED"
