"""Shared fixtures: in-memory lookups and a small German demo shop."""

from decimal import Decimal

import pytest

from storefront.domain.models import (
    Country,
    CountryState,
    Currency,
    Customer,
    CustomerAddress,
    CustomerGroup,
    PaymentMethod,
    ShippingMethod,
    ShopDetail,
    TaxRule,
)
from storefront.services.context import ContextResolver, TranslationContextProvider


class InMemoryLookup:
    """Entity lookup over a dict, records every requested id list."""

    def __init__(self, *entities):
        self.entities = {entity.id: entity for entity in entities}
        self.calls = []

    async def read_basic(self, ids, context):
        self.calls.append(list(ids))
        return {entity_id: self.entities[entity_id] for entity_id in ids if entity_id in self.entities}


class InMemoryShopLookup:
    def __init__(self, *shops):
        self.shops = {shop.id: shop for shop in shops}
        self.contexts = []

    async def read_detail(self, shop_id, context):
        self.contexts.append(context)
        return self.shops.get(shop_id)


class InMemoryTaxRuleLookup:
    def __init__(self, *rules):
        self.rules = list(rules)
        self.calls = 0

    async def search(self, context):
        self.calls += 1
        return list(self.rules)


class InMemoryTranslationStore:
    def __init__(self, rows):
        self.rows = rows

    async def fetch_shop_row(self, shop_id):
        return self.rows.get(shop_id)


@pytest.fixture
def germany():
    return Country(id="de", iso="DE", name="Deutschland")


@pytest.fixture
def austria():
    return Country(id="at", iso="AT", name="Österreich")


@pytest.fixture
def bavaria():
    return CountryState(id="by", country_id="de", short_code="BY", name="Bayern")


@pytest.fixture
def tyrol():
    return CountryState(id="tyrol", country_id="at", short_code="T", name="Tirol")


@pytest.fixture
def eur():
    return Currency(id="eur", iso_code="EUR", symbol="€", is_default=True)


@pytest.fixture
def usd():
    return Currency(id="usd", iso_code="USD", symbol="$", factor=Decimal("1.17"))


@pytest.fixture
def group_ek():
    return CustomerGroup(id="EK", name="Shopkunden")


@pytest.fixture
def group_dealer():
    return CustomerGroup(id="H", name="Händler", display_gross=False, input_gross=False)


@pytest.fixture
def group_b2b():
    return CustomerGroup(id="B2B", name="Firmenkunden", display_gross=False)


@pytest.fixture
def invoice():
    return PaymentMethod(id="invoice", technical_name="invoice", name="Rechnung")


@pytest.fixture
def prepayment():
    return PaymentMethod(id="prepayment", technical_name="prepayment", name="Vorkasse")


@pytest.fixture
def paypal():
    return PaymentMethod(id="paypal", technical_name="paypal", name="PayPal")


@pytest.fixture
def standard_shipping():
    return ShippingMethod(id="standard", name="Standard Versand")


@pytest.fixture
def express_shipping():
    return ShippingMethod(id="express", name="Express Versand", type=1)


@pytest.fixture
def tax_rules():
    return (
        TaxRule(id="tax-19", rate=Decimal("19"), name="19%"),
        TaxRule(id="tax-7", rate=Decimal("7"), name="7%"),
    )


@pytest.fixture
def shop(eur, group_ek, germany, invoice, standard_shipping):
    return ShopDetail(
        id="shop-de",
        name="Demoshop",
        currency=eur,
        customer_group=group_ek,
        country=germany,
        payment_method=invoice,
        shipping_method=standard_shipping,
        is_default=True,
    )


@pytest.fixture
def home_address(germany, bavaria):
    return CustomerAddress(
        id="addr-home",
        customer_id="cust-1",
        country=germany,
        state=bavaria,
        first_name="Max",
        last_name="Mustermann",
        street="Musterstraße 1",
        zip_code="80331",
        city="München",
    )


@pytest.fixture
def office_address(austria, tyrol):
    return CustomerAddress(
        id="addr-office",
        customer_id="cust-1",
        country=austria,
        state=tyrol,
        company="Muster GmbH",
        street="Maria-Theresien-Straße 2",
        zip_code="6020",
        city="Innsbruck",
    )


@pytest.fixture
def foreign_address(austria):
    return CustomerAddress(id="addr-foreign", customer_id="cust-2", country=austria, city="Wien")


@pytest.fixture
def customer(group_dealer, home_address, prepayment):
    return Customer(
        id="cust-1",
        email="max@example.com",
        group=group_dealer,
        default_billing_address=home_address,
        default_shipping_address=home_address,
        number="20001",
        first_name="Max",
        last_name="Mustermann",
        default_payment_method=prepayment,
    )


@pytest.fixture
def lookups(
    shop,
    eur,
    usd,
    group_ek,
    group_dealer,
    group_b2b,
    customer,
    home_address,
    office_address,
    foreign_address,
    germany,
    austria,
    bavaria,
    tyrol,
    tax_rules,
    invoice,
    prepayment,
    paypal,
    standard_shipping,
    express_shipping,
):
    """All collaborators of the resolver, keyed by constructor argument name."""
    return {
        "translation_store": InMemoryTranslationStore(
            {"shop-de": {"uuid": "shop-de", "is_default": 1, "fallback_translation_uuid": None}}
        ),
        "shops": InMemoryShopLookup(shop),
        "currencies": InMemoryLookup(eur, usd),
        "customer_groups": InMemoryLookup(group_ek, group_dealer, group_b2b),
        "customers": InMemoryLookup(customer),
        "addresses": InMemoryLookup(home_address, office_address, foreign_address),
        "countries": InMemoryLookup(germany, austria),
        "country_states": InMemoryLookup(bavaria, tyrol),
        "tax_rules": InMemoryTaxRuleLookup(*tax_rules),
        "payment_methods": InMemoryLookup(invoice, prepayment, paypal),
        "shipping_methods": InMemoryLookup(standard_shipping, express_shipping),
    }


def build_resolver(lookups, **kwargs) -> ContextResolver:
    collaborators = dict(lookups)
    store = collaborators.pop("translation_store")
    return ContextResolver(
        translation_provider=TranslationContextProvider(store=store),
        **collaborators,
        **kwargs,
    )


@pytest.fixture
def resolver(lookups):
    return build_resolver(lookups)


@pytest.fixture
def parallel_resolver(lookups):
    return build_resolver(lookups, parallel_lookups=True)


@pytest.fixture
def make_resolver(lookups):
    """Factory for resolvers with extra options; reads `lookups` at call time."""

    def factory(**kwargs):
        return build_resolver(lookups, **kwargs)

    return factory
