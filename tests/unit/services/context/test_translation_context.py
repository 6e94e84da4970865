"""Tests for TranslationContextProvider and the factory wiring."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.core.config import Settings
from storefront.domain.value_objects import ShopScope
from storefront.services.context import ContextResolver, TranslationContextProvider, create_context_resolver
from storefront.utils.error_handler import ShopNotFoundException


class TestTranslationContextProvider:
    @pytest.mark.asyncio
    async def test_resolves_row(self):
        store = MagicMock()
        store.fetch_shop_row = AsyncMock(
            return_value={"uuid": "shop-ch", "is_default": 0, "fallback_translation_uuid": "shop-de"}
        )
        provider = TranslationContextProvider(store=store)

        context = await provider.resolve("shop-ch")

        assert context.shop_id == "shop-ch"
        assert context.is_default_shop is False
        assert context.fallback_id == "shop-de"
        assert context.has_fallback is True
        store.fetch_shop_row.assert_awaited_once_with("shop-ch")

    @pytest.mark.asyncio
    async def test_empty_fallback_means_none(self):
        store = MagicMock()
        store.fetch_shop_row = AsyncMock(return_value={"uuid": "shop-de", "is_default": 1, "fallback_translation_uuid": ""})

        context = await TranslationContextProvider(store=store).resolve("shop-de")

        assert context.fallback_id is None
        assert context.has_fallback is False

    @pytest.mark.asyncio
    async def test_missing_row_raises(self):
        store = MagicMock()
        store.fetch_shop_row = AsyncMock(return_value=None)

        with pytest.raises(ShopNotFoundException):
            await TranslationContextProvider(store=store).resolve("nope")


class TestCreateContextResolver:
    def test_uses_settings(self, lookups):
        settings = Settings(_env_file=None, FALLBACK_CUSTOMER_GROUP_ID="H", CONTEXT_PARALLEL_LOOKUPS=True)

        resolver = create_context_resolver(**lookups, settings=settings)

        assert isinstance(resolver, ContextResolver)
        assert resolver.fallback_customer_group_id == "H"
        assert resolver.parallel_lookups is True
        assert resolver.translation_provider.store is lookups["translation_store"]

    @pytest.mark.asyncio
    async def test_factory_resolver_works_end_to_end(self, lookups, group_dealer):
        settings = Settings(_env_file=None, FALLBACK_CUSTOMER_GROUP_ID="H")
        resolver = create_context_resolver(**lookups, settings=settings)

        context = await resolver.create(ShopScope(shop_id="shop-de"))

        assert context.fallback_customer_group == group_dealer
