"""
ShopContext domain model.

The fully resolved bundle of business rules applicable to one request. It is
built in one step by the context resolver and shared by reference afterwards.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .currency import Currency
from .customer import ActiveCustomer, CustomerGroup
from .location import ShippingLocation
from .methods import PaymentMethod, ShippingMethod
from .shop import ShopDetail
from .tax import TaxRule

_REQUIRED_FIELDS = (
    "shop",
    "currency",
    "customer_group",
    "fallback_customer_group",
    "payment_method",
    "shipping_method",
    "shipping_location",
)


@dataclass(frozen=True)
class ShopContext:
    """
    Domain model holding the business rules of a single request.

    Attributes:
        shop: Shop the request belongs to
        currency: Active currency
        customer_group: Active customer group
        fallback_customer_group: Group used when group specific data is missing
        tax_rules: Tax rules applicable to the calculation
        payment_method: Active payment method
        shipping_method: Active shipping method
        shipping_location: Delivery destination
        customer: Logged-in customer with its active addresses, None for guests
    """

    shop: ShopDetail
    currency: Currency
    customer_group: CustomerGroup
    fallback_customer_group: CustomerGroup
    tax_rules: tuple[TaxRule, ...]
    payment_method: PaymentMethod
    shipping_method: ShippingMethod
    shipping_location: ShippingLocation
    customer: Optional[ActiveCustomer] = None

    def __post_init__(self) -> None:
        """Validate that every mandatory part was resolved."""
        missing = [name for name in _REQUIRED_FIELDS if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Shop context is missing required fields: {', '.join(missing)}")

        if not isinstance(self.tax_rules, tuple):
            object.__setattr__(self, "tax_rules", tuple(self.tax_rules))

    @property
    def is_logged_in(self) -> bool:
        """Check if a customer is logged in."""
        return self.customer is not None

    @property
    def tax_rule_ids(self) -> list[str]:
        """Get identifiers of the applicable tax rules."""
        return [rule.id for rule in self.tax_rules]

    def to_dict(self) -> dict[str, Any]:
        """Convert the context to an identifier summary (logging, debugging)."""
        location = self.shipping_location
        return {
            "shop_id": self.shop.id,
            "currency": self.currency.iso_code,
            "customer_group_id": self.customer_group.id,
            "fallback_customer_group_id": self.fallback_customer_group.id,
            "tax_rule_ids": self.tax_rule_ids,
            "payment_method_id": self.payment_method.id,
            "shipping_method_id": self.shipping_method.id,
            "shipping_location": {
                "country_id": location.country.id,
                "state_id": location.state.id if location.state else None,
                "address_id": location.address.id if location.address else None,
            },
            "customer": self.customer.to_dict() if self.customer else None,
        }
