"""Tests for domain models and value objects."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from storefront.domain.models import (
    ActiveCustomer,
    Currency,
    ShippingLocation,
    ShopContext,
    TaxRule,
)
from storefront.domain.value_objects import CustomerScope, ShopScope, TranslationContext
from storefront.utils.error_handler import ValidationException


class TestScopes:
    def test_shop_scope_requires_shop_id(self):
        with pytest.raises(ValidationException) as exc_info:
            ShopScope(shop_id="")

        assert exc_info.value.field == "shop_id"

    def test_scopes_are_immutable(self):
        scope = ShopScope(shop_id="shop-de")

        with pytest.raises(FrozenInstanceError):
            scope.currency_id = "usd"

    def test_customer_scope_flags(self):
        assert CustomerScope().is_logged_in is False
        assert CustomerScope(customer_id="c").is_logged_in is True
        assert CustomerScope(customer_id="c").has_address_overrides is False
        assert CustomerScope(shipping_address_id="a").has_address_overrides is True

    def test_translation_context_from_row(self):
        context = TranslationContext.from_row({"uuid": 7, "is_default": "1", "fallback_translation_uuid": None})

        assert context == TranslationContext(shop_id="7", is_default_shop=True, fallback_id=None)


class TestValueValidation:
    def test_currency_factor_is_decimal(self):
        assert Currency(id="chf", iso_code="CHF", factor=1.05).factor == Decimal("1.05")

    def test_currency_rejects_bad_iso_code(self):
        with pytest.raises(ValueError):
            Currency(id="x", iso_code="EURO")

    def test_tax_rate_cannot_be_negative(self):
        with pytest.raises(ValueError):
            TaxRule(id="t", rate=Decimal("-1"))


class TestShippingLocation:
    def test_from_address(self, home_address, germany, bavaria):
        location = ShippingLocation.from_address(home_address)

        assert location.country == germany
        assert location.state == bavaria
        assert location.address == home_address

    def test_from_country(self, austria):
        location = ShippingLocation.from_country(austria)

        assert location.state is None
        assert location.address is None

    def test_state_must_belong_to_country(self, austria, bavaria):
        with pytest.raises(ValueError):
            ShippingLocation(country=austria, state=bavaria)


class TestActiveCustomer:
    def test_defaults_to_customer_addresses(self, customer, home_address):
        active = ActiveCustomer.from_customer(customer)

        assert active.active_billing_address == home_address
        assert active.active_shipping_address == home_address
        assert active.group == customer.group
        assert active.id == "cust-1"

    def test_overrides_do_not_touch_customer(self, customer, office_address, home_address):
        active = ActiveCustomer.from_customer(customer, shipping_address=office_address)

        assert active.active_shipping_address == office_address
        assert active.customer is customer
        assert customer.default_shipping_address == home_address

    def test_payment_methods_delegate(self, customer, prepayment):
        active = ActiveCustomer.from_customer(customer)

        assert active.default_payment_method == prepayment
        assert active.last_payment_method is None


class TestShopContext:
    @pytest.fixture
    def context_kwargs(self, shop, eur, group_ek, tax_rules, invoice, standard_shipping, germany):
        return {
            "shop": shop,
            "currency": eur,
            "customer_group": group_ek,
            "fallback_customer_group": group_ek,
            "tax_rules": list(tax_rules),
            "payment_method": invoice,
            "shipping_method": standard_shipping,
            "shipping_location": ShippingLocation.from_country(germany),
        }

    def test_tax_rules_become_tuple(self, context_kwargs, tax_rules):
        context = ShopContext(**context_kwargs)

        assert context.tax_rules == tax_rules
        assert context.tax_rule_ids == ["tax-19", "tax-7"]

    @pytest.mark.parametrize("field_name", ["shop", "currency", "payment_method", "shipping_method"])
    def test_required_fields(self, context_kwargs, field_name):
        context_kwargs[field_name] = None

        with pytest.raises(ValueError, match=field_name):
            ShopContext(**context_kwargs)

    def test_to_dict(self, context_kwargs, customer, office_address, tyrol):
        context_kwargs["customer"] = ActiveCustomer.from_customer(customer, shipping_address=office_address)
        context_kwargs["shipping_location"] = ShippingLocation.from_address(office_address)

        summary = ShopContext(**context_kwargs).to_dict()

        assert summary["shop_id"] == "shop-de"
        assert summary["currency"] == "EUR"
        assert summary["shipping_location"] == {
            "country_id": "at",
            "state_id": tyrol.id,
            "address_id": "addr-office",
        }
        assert summary["customer"]["active_shipping_address_id"] == "addr-office"

