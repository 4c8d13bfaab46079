"""LinkResolver facade tests: memoization, working language, error policy."""

import asyncio

import pytest

from linkresolver.application.services import LinkResolver
from linkresolver.domain.enums import ExpressionKind, LookupOperation
from linkresolver.domain.exceptions import ValidationException
from linkresolver.domain.value_objects import CacheKey, ResolutionResult


class TestMemoization:
    """One entry per (operation, raw expression, resolved language), empty results included."""

    async def test_second_call_served_from_cache(
        self, resolver, cache, localization_store
    ) -> None:
        localization_store.get_localized_value.return_value = "Zelt"
        first = await resolver.get_display_name("product:42", 2)
        second = await resolver.get_display_name("product:42", 2)
        assert first == second == ResolutionResult(ExpressionKind.PRODUCT, 42, "Zelt")
        localization_store.get_localized_value.assert_awaited_once()
        assert cache.get(CacheKey(LookupOperation.NAME, "product:42", 2)) == first

    async def test_empty_results_are_cached(self, resolver, slug_store) -> None:
        assert (await resolver.get_link("product:42", 2)).resolved == ""
        assert (await resolver.get_link("product:42", 2)).resolved == ""
        assert slug_store.get_active_slug.await_count == 2

    async def test_name_and_link_keys_do_not_collide(
        self, resolver, localization_store, slug_store
    ) -> None:
        localization_store.get_localized_value.return_value = "Outdoor"
        slug_store.get_active_slug.return_value = "outdoor-gear"
        name = await resolver.get_display_name("category:10", 1)
        link = await resolver.get_link("category:10", 1)
        assert name.resolved == "Outdoor"
        assert link.resolved == "/outdoor-gear"

    async def test_languages_cached_separately(
        self, resolver, localization_store
    ) -> None:
        localization_store.get_localized_value.side_effect = ["Tent", "Zelt"]
        assert (await resolver.get_display_name("product:42", 1)).resolved == "Tent"
        assert (await resolver.get_display_name("product:42", 2)).resolved == "Zelt"

    async def test_raw_expression_is_the_key(self, resolver, localization_store) -> None:
        localization_store.get_localized_value.return_value = "Tent"
        await resolver.get_display_name("product:42", 1)
        await resolver.get_display_name("Product:42", 1)
        assert localization_store.get_localized_value.await_count == 2

    async def test_clear_cache(self, resolver, localization_store) -> None:
        localization_store.get_localized_value.return_value = "Tent"
        await resolver.get_display_name("product:42", 1)
        assert await resolver.clear_cache() == 1
        await resolver.get_display_name("product:42", 1)
        assert localization_store.get_localized_value.await_count == 2

    async def test_concurrent_cold_lookups_store_one_entry(
        self, resolver, cache, localization_store
    ) -> None:
        async def slow_lookup(*args) -> str:
            await asyncio.sleep(0)
            return "Zelt"

        localization_store.get_localized_value.side_effect = slow_lookup
        results = await asyncio.gather(
            *(resolver.get_display_name("product:42", 2) for _ in range(5))
        )
        assert results == [ResolutionResult(ExpressionKind.PRODUCT, 42, "Zelt")] * 5
        assert len(cache) == 1
        assert cache.get(CacheKey(LookupOperation.NAME, "product:42", 2)) == results[0]


class TestWorkingLanguage:
    """Language 0 or below resolves through the provider before keying."""

    async def test_sentinel_uses_provider(
        self, resolver, cache, language_provider, localization_store
    ) -> None:
        language_provider.language_id = 3
        await resolver.get_display_name("product:42")
        localization_store.get_localized_value.assert_awaited_once_with(
            3, 42, "Product", "Name"
        )
        assert cache.get(CacheKey(LookupOperation.NAME, "product:42", 3)) is not None

    async def test_sentinel_and_explicit_share_entry(
        self, resolver, language_provider, localization_store
    ) -> None:
        language_provider.language_id = 2
        localization_store.get_localized_value.return_value = "Zelt"
        await resolver.get_display_name("product:42", 0)
        await resolver.get_display_name("product:42", 2)
        localization_store.get_localized_value.assert_awaited_once()

    async def test_negative_language_treated_as_sentinel(
        self, resolver, language_provider, slug_store
    ) -> None:
        language_provider.language_id = 4
        await resolver.get_link("topic:7", -1)
        slug_store.get_active_slug.assert_any_await(7, "Topic", 4)


class TestMalformedInput:
    """Blank or unparseable expressions resolve without raising."""

    async def test_blank_expression(self, resolver) -> None:
        assert await resolver.get_link("", 1) == ResolutionResult(ExpressionKind.URL, "", "")
        assert await resolver.get_display_name(None, 1) == ResolutionResult(  # type: ignore[arg-type]
            ExpressionKind.URL, "", ""
        )

    async def test_bad_id_passes_through_as_url(self, resolver, slug_store) -> None:
        result = await resolver.get_link("product:abc", 1)
        assert result == ResolutionResult(ExpressionKind.URL, "product:abc", "product:abc")
        slug_store.get_active_slug.assert_not_awaited()

    async def test_virtual_url(self, resolver) -> None:
        result = await resolver.get_link("url:~/about", 1)
        assert result == ResolutionResult(ExpressionKind.URL, "~/about", "/about")


class TestCollaboratorErrors:
    """Failures are never cached; they are logged or re-raised per policy."""

    async def test_error_swallowed_and_not_cached(
        self, resolver, cache, localization_store, caplog
    ) -> None:
        localization_store.get_localized_value.side_effect = RuntimeError("db down")
        result = await resolver.get_display_name("product:42", 1)
        assert result == ResolutionResult(ExpressionKind.PRODUCT, 42, "")
        assert len(cache) == 0
        assert "lookup failed" in caplog.text

        localization_store.get_localized_value.side_effect = None
        localization_store.get_localized_value.return_value = "Tent"
        assert (await resolver.get_display_name("product:42", 1)).resolved == "Tent"

    async def test_error_propagates_when_not_swallowing(
        self, display_names, links, cache, language_provider, slug_store
    ) -> None:
        resolver = LinkResolver(
            display_names,
            links,
            cache,
            language_provider,
            swallow_collaborator_errors=False,
        )
        slug_store.get_active_slug.side_effect = RuntimeError("db down")
        with pytest.raises(RuntimeError, match="db down"):
            await resolver.get_link("category:10", 1)
        assert len(cache) == 0

    async def test_unresolved_working_language_swallowed(
        self, resolver, cache, language_provider, localization_store, caplog
    ) -> None:
        language_provider.language_id = 0
        result = await resolver.get_display_name("product:42")
        assert result == ResolutionResult(ExpressionKind.PRODUCT, 42, "")
        assert len(cache) == 0
        localization_store.get_localized_value.assert_not_awaited()
        assert "lookup failed" in caplog.text

    async def test_unresolved_working_language_raises_when_not_swallowing(
        self, display_names, links, cache, language_provider
    ) -> None:
        language_provider.language_id = 0
        resolver = LinkResolver(
            display_names,
            links,
            cache,
            language_provider,
            swallow_collaborator_errors=False,
        )
        with pytest.raises(ValidationException, match="language"):
            await resolver.get_link("product:42")
        assert len(cache) == 0
