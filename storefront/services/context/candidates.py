"""
Fallback chains for context resolution.

A chain is an ordered tuple of candidates. Each candidate is a zero argument
coroutine function that returns a value or None; ``first_match`` awaits them
in order and returns the first value. Candidates only read state that was
resolved before the chain was built.
"""

import logging
from typing import Awaitable, Callable, Optional, Sequence, TypeVar

from storefront.domain.models import (
    ActiveCustomer,
    Country,
    CountryState,
    Currency,
    PaymentMethod,
    ShippingLocation,
    ShippingMethod,
    ShopDetail,
)
from storefront.domain.value_objects import CheckoutScope, TranslationContext
from storefront.services.context.interfaces import IEntityLookup

logger = logging.getLogger(__name__)

T = TypeVar("T")

Candidate = Callable[[], Awaitable[Optional[T]]]


async def first_match(candidates: Sequence[Candidate[T]]) -> Optional[T]:
    """Await candidates in order and return the first non-None value."""
    for candidate in candidates:
        value = await candidate()
        if value is not None:
            return value
    return None


def fixed(value: Optional[T]) -> Candidate[T]:
    """Candidate returning an already known value."""

    async def candidate() -> Optional[T]:
        return value

    return candidate


def lookup_by_id(
    lookup: IEntityLookup[T],
    entity_id: Optional[str],
    context: TranslationContext,
    label: str,
) -> Candidate[T]:
    """
    Candidate reading a single entity by id.

    Yields None without calling the lookup when no id was requested, and
    logs a warning when the id is unknown to the lookup.
    """

    async def candidate() -> Optional[T]:
        if entity_id is None:
            return None
        entities = await lookup.read_basic([entity_id], context)
        if entity_id not in entities:
            logger.warning(f"Ignoring unknown {label} override {entity_id}")
            return None
        return entities[entity_id]

    return candidate


def currency_chain(
    shop: ShopDetail,
    currency_id: Optional[str],
    currencies: IEntityLookup[Currency],
    context: TranslationContext,
) -> tuple[Candidate[Currency], ...]:
    """Requested currency, then the shop currency."""
    return (
        lookup_by_id(currencies, currency_id, context, "currency"),
        fixed(shop.currency),
    )


def payment_chain(
    shop: ShopDetail,
    customer: Optional[ActiveCustomer],
    checkout_scope: CheckoutScope,
    payment_methods: IEntityLookup[PaymentMethod],
    context: TranslationContext,
) -> tuple[Candidate[PaymentMethod], ...]:
    """Checkout selection, last used, registration default, then shop default."""
    return (
        lookup_by_id(payment_methods, checkout_scope.payment_method_id, context, "payment method"),
        fixed(customer.last_payment_method if customer else None),
        fixed(customer.default_payment_method if customer else None),
        fixed(shop.payment_method),
    )


def shipping_method_chain(
    shop: ShopDetail,
    checkout_scope: CheckoutScope,
    shipping_methods: IEntityLookup[ShippingMethod],
    context: TranslationContext,
) -> tuple[Candidate[ShippingMethod], ...]:
    """Checkout selection, then shop default."""
    return (
        lookup_by_id(shipping_methods, checkout_scope.shipping_method_id, context, "shipping method"),
        fixed(shop.shipping_method),
    )


def state_location(
    state_id: Optional[str],
    states: IEntityLookup[CountryState],
    countries: IEntityLookup[Country],
    context: TranslationContext,
) -> Candidate[ShippingLocation]:
    """Candidate building a location from a state and the country it belongs to."""
    read_state = lookup_by_id(states, state_id, context, "state")

    async def candidate() -> Optional[ShippingLocation]:
        state = await read_state()
        if state is None:
            return None
        country = await lookup_by_id(countries, state.country_id, context, "state country")()
        if country is None:
            return None
        return ShippingLocation(country=country, state=state)

    return candidate


def country_location(
    country_id: Optional[str],
    countries: IEntityLookup[Country],
    context: TranslationContext,
) -> Candidate[ShippingLocation]:
    """Candidate building a location from a whole country."""
    read_country = lookup_by_id(countries, country_id, context, "country")

    async def candidate() -> Optional[ShippingLocation]:
        country = await read_country()
        return ShippingLocation.from_country(country) if country else None

    return candidate


def guest_location_chain(
    shop: ShopDetail,
    checkout_scope: CheckoutScope,
    states: IEntityLookup[CountryState],
    countries: IEntityLookup[Country],
    context: TranslationContext,
) -> tuple[Candidate[ShippingLocation], ...]:
    """State preview, country preview, then the shop country."""
    return (
        state_location(checkout_scope.state_id, states, countries, context),
        country_location(checkout_scope.country_id, countries, context),
        fixed(ShippingLocation.from_country(shop.country)),
    )
