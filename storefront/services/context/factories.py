"""Factory function wiring a ContextResolver from settings (DIP)."""

import logging
from typing import Optional

from storefront.core.config import Settings, get_settings
from storefront.services.context.interfaces import (
    IEntityLookup,
    IShopLookup,
    ITaxRuleLookup,
    ITranslationContextStore,
)
from storefront.services.context.resolver import ContextResolver
from storefront.services.context.translation_context import TranslationContextProvider

logger = logging.getLogger(__name__)


def create_context_resolver(
    translation_store: ITranslationContextStore,
    shops: IShopLookup,
    currencies: IEntityLookup,
    customer_groups: IEntityLookup,
    customers: IEntityLookup,
    addresses: IEntityLookup,
    countries: IEntityLookup,
    country_states: IEntityLookup,
    tax_rules: ITaxRuleLookup,
    payment_methods: IEntityLookup,
    shipping_methods: IEntityLookup,
    settings: Optional[Settings] = None,
) -> ContextResolver:
    """
    Create a fully initialized resolver.

    The fallback customer group and the parallel lookup switch are taken from
    settings, so callers never repeat those values.

    Args:
        translation_store: Store for the raw shop translation row
        shops: Shop detail lookup
        currencies: Currency lookup
        customer_groups: Customer group lookup
        customers: Customer lookup
        addresses: Customer address lookup
        countries: Country lookup
        country_states: Country state lookup
        tax_rules: Tax rule search
        payment_methods: Payment method lookup
        shipping_methods: Shipping method lookup
        settings: Configuration (defaults to get_settings())

    Returns:
        ContextResolver: Configured resolver
    """
    settings = settings or get_settings()

    logger.debug(
        f"Creating context resolver: fallback_group={settings.FALLBACK_CUSTOMER_GROUP_ID}, "
        f"parallel_lookups={settings.CONTEXT_PARALLEL_LOOKUPS}"
    )

    return ContextResolver(
        translation_provider=TranslationContextProvider(store=translation_store),
        shops=shops,
        currencies=currencies,
        customer_groups=customer_groups,
        customers=customers,
        addresses=addresses,
        countries=countries,
        country_states=country_states,
        tax_rules=tax_rules,
        payment_methods=payment_methods,
        shipping_methods=shipping_methods,
        fallback_customer_group_id=settings.FALLBACK_CUSTOMER_GROUP_ID,
        parallel_lookups=settings.CONTEXT_PARALLEL_LOOKUPS,
    )
