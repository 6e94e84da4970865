"""Shop domain model."""

from dataclasses import dataclass
from typing import Optional

from .currency import Currency
from .customer import CustomerGroup
from .location import Country
from .methods import PaymentMethod, ShippingMethod


@dataclass(frozen=True)
class ShopDetail:
    """
    A configured storefront with its defaults.

    Attributes:
        id: Shop identifier
        name: Shop name
        currency: Default currency
        customer_group: Default customer group for visitors
        country: Default delivery country
        payment_method: Default payment method
        shipping_method: Default shipping method
        is_default: Whether this is the main shop
        fallback_translation_id: Shop whose translations are used as fallback
    """

    id: str
    name: str
    currency: Currency
    customer_group: CustomerGroup
    country: Country
    payment_method: PaymentMethod
    shipping_method: ShippingMethod
    is_default: bool = False
    fallback_translation_id: Optional[str] = None
