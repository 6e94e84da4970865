"""
ContextResolver - builds the ShopContext of a request.

The resolver is a thin orchestration layer over read-only lookups:
- Only a missing shop aborts the resolution (ShopNotFoundException)
- Overrides pointing to unknown entities fall back to defaults
- Any other collaborator error propagates unchanged
"""

import asyncio
import logging
from typing import Optional

from storefront.domain.models import (
    ActiveCustomer,
    Country,
    CountryState,
    Currency,
    Customer,
    CustomerAddress,
    CustomerGroup,
    PaymentMethod,
    ShippingLocation,
    ShippingMethod,
    ShopContext,
    ShopDetail,
    TaxRule,
)
from storefront.domain.value_objects import CheckoutScope, CustomerScope, ShopScope, TranslationContext
from storefront.services.context.candidates import (
    currency_chain,
    first_match,
    guest_location_chain,
    payment_chain,
    shipping_method_chain,
)
from storefront.services.context.interfaces import IEntityLookup, IShopLookup, ITaxRuleLookup
from storefront.services.context.translation_context import TranslationContextProvider
from storefront.utils.error_handler import ShopNotFoundException

logger = logging.getLogger(__name__)


class ContextResolver:
    """
    Resolves shop, customer and checkout scopes into a ShopContext.

    Every lookup is injected via constructor. The resolver keeps no state
    between calls, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        translation_provider: TranslationContextProvider,
        shops: IShopLookup,
        currencies: IEntityLookup[Currency],
        customer_groups: IEntityLookup[CustomerGroup],
        customers: IEntityLookup[Customer],
        addresses: IEntityLookup[CustomerAddress],
        countries: IEntityLookup[Country],
        country_states: IEntityLookup[CountryState],
        tax_rules: ITaxRuleLookup,
        payment_methods: IEntityLookup[PaymentMethod],
        shipping_methods: IEntityLookup[ShippingMethod],
        fallback_customer_group_id: str = "EK",
        parallel_lookups: bool = False,
    ):
        """
        Initialize resolver with lookup dependencies (DIP).

        Args:
            translation_provider: Resolves the translation context of a shop
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
            fallback_customer_group_id: Group used as fallback in every context
            parallel_lookups: Fetch currency, fallback group and tax rules concurrently
        """
        self.translation_provider = translation_provider
        self.shops = shops
        self.currencies = currencies
        self.customer_groups = customer_groups
        self.customers = customers
        self.addresses = addresses
        self.countries = countries
        self.country_states = country_states
        self.tax_rules = tax_rules
        self.payment_methods = payment_methods
        self.shipping_methods = shipping_methods
        self.fallback_customer_group_id = fallback_customer_group_id
        self.parallel_lookups = parallel_lookups

    async def create(
        self,
        shop_scope: ShopScope,
        customer_scope: Optional[CustomerScope] = None,
        checkout_scope: Optional[CheckoutScope] = None,
    ) -> ShopContext:
        """
        Resolve the context of a request.

        This method orchestrates the complete flow:
        1. Translation context and shop detail
        2. Currency, fallback customer group and tax rules
        3. Customer (with active addresses) or guest shipping location
        4. Customer group switch
        5. Payment and shipping method

        Args:
            shop_scope: Shop and currency of the request
            customer_scope: Logged-in customer and customer overrides
            checkout_scope: Checkout selections

        Returns:
            ShopContext: Fully populated context

        Raises:
            ShopNotFoundException: If the shop does not exist
        """
        customer_scope = customer_scope or CustomerScope()
        checkout_scope = checkout_scope or CheckoutScope()
        shop_id = shop_scope.shop_id

        logger.debug(f"Resolving context for shop {shop_id}")
        context = await self.translation_provider.resolve(shop_id)

        # Step 1: Shop with all fallbacks
        shop = await self.shops.read_detail(shop_id, context)
        if shop is None:
            raise ShopNotFoundException(shop_id=shop_id)

        # Step 2: Independent lookups
        if self.parallel_lookups:
            currency, fallback_group, tax_rules = await asyncio.gather(
                self._resolve_currency(shop, shop_scope, context),
                self._resolve_fallback_group(shop, context),
                self._resolve_tax_rules(context),
            )
        else:
            currency = await self._resolve_currency(shop, shop_scope, context)
            fallback_group = await self._resolve_fallback_group(shop, context)
            tax_rules = await self._resolve_tax_rules(context)

        # Step 3: Customer or guest location
        customer_group = shop.customer_group
        customer = None
        if customer_scope.is_logged_in:
            customer = await self._load_customer(customer_scope, context)

        if customer is not None:
            shipping_location = ShippingLocation.from_address(customer.active_shipping_address)
            customer_group = customer.group
        else:
            shipping_location = await first_match(
                guest_location_chain(shop, checkout_scope, self.country_states, self.countries, context)
            )

        # Step 4: Customer group switched?
        if customer_scope.customer_group_id is not None:
            customer_group = await self._switch_customer_group(customer_group, customer_scope, context)

        # Step 5: Payment and shipping method
        payment_method = await first_match(
            payment_chain(shop, customer, checkout_scope, self.payment_methods, context)
        )
        shipping_method = await first_match(
            shipping_method_chain(shop, checkout_scope, self.shipping_methods, context)
        )

        shop_context = ShopContext(
            shop=shop,
            currency=currency,
            customer_group=customer_group,
            fallback_customer_group=fallback_group,
            tax_rules=tax_rules,
            payment_method=payment_method,
            shipping_method=shipping_method,
            shipping_location=shipping_location,
            customer=customer,
        )

        logger.info(
            f"Resolved context for shop {shop_id}: currency={currency.iso_code}, "
            f"group={customer_group.id}, payment={payment_method.id}, shipping={shipping_method.id}, "
            f"customer={customer.id if customer else None}"
        )
        return shop_context

    async def _resolve_currency(self, shop: ShopDetail, shop_scope: ShopScope, context: TranslationContext) -> Currency:
        return await first_match(currency_chain(shop, shop_scope.currency_id, self.currencies, context))

    async def _resolve_fallback_group(self, shop: ShopDetail, context: TranslationContext) -> CustomerGroup:
        groups = await self.customer_groups.read_basic([self.fallback_customer_group_id], context)
        fallback_group = groups.get(self.fallback_customer_group_id)
        if fallback_group is None:
            logger.warning(
                f"Fallback customer group {self.fallback_customer_group_id} not found, "
                f"using group {shop.customer_group.id} of shop {shop.id}"
            )
            return shop.customer_group
        return fallback_group

    async def _resolve_tax_rules(self, context: TranslationContext) -> tuple[TaxRule, ...]:
        # TODO: filter tax rules by delivery area and customer group once area rules exist
        return tuple(await self.tax_rules.search(context))

    async def _load_customer(
        self, customer_scope: CustomerScope, context: TranslationContext
    ) -> Optional[ActiveCustomer]:
        """
        Load the logged-in customer and combine it with the switched addresses.

        Returns:
            ActiveCustomer | None: None if the customer does not exist
        """
        customer_id = customer_scope.customer_id
        customers = await self.customers.read_basic([customer_id], context)
        customer = customers.get(customer_id)

        if customer is None:
            logger.warning(f"Customer {customer_id} not found, resolving context as guest")
            return None

        if not customer_scope.has_address_overrides:
            return ActiveCustomer.from_customer(customer)

        address_ids = [
            address_id
            for address_id in (customer_scope.billing_address_id, customer_scope.shipping_address_id)
            if address_id is not None
        ]
        addresses = await self.addresses.read_basic(address_ids, context)

        billing_address = self._owned_address(addresses, customer_scope.billing_address_id, customer)
        shipping_address = self._owned_address(addresses, customer_scope.shipping_address_id, customer)

        return ActiveCustomer.from_customer(
            customer,
            billing_address=billing_address,
            shipping_address=shipping_address,
        )

    @staticmethod
    def _owned_address(addresses, address_id: Optional[str], customer: Customer) -> Optional[CustomerAddress]:
        if address_id is None:
            return None

        address = addresses.get(address_id)
        if address is None:
            logger.warning(f"Ignoring unknown address override {address_id} for customer {customer.id}")
            return None

        if address.customer_id != customer.id:
            logger.warning(f"Ignoring address override {address_id}: it does not belong to customer {customer.id}")
            return None

        return address

    async def _switch_customer_group(
        self, current_group: CustomerGroup, customer_scope: CustomerScope, context: TranslationContext
    ) -> CustomerGroup:
        group_id = customer_scope.customer_group_id
        groups = await self.customer_groups.read_basic([group_id], context)
        if group_id not in groups:
            logger.warning(f"Ignoring unknown customer group override {group_id}")
            return current_group
        return groups[group_id]
