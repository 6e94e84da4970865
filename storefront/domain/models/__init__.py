"""
Domain models for business entities.

These models are read-only snapshots handed out by the entity lookups and
the ShopContext assembled from them.
"""

from .currency import Currency
from .customer import ActiveCustomer, Customer, CustomerAddress, CustomerGroup
from .location import Country, CountryState, ShippingLocation
from .methods import PaymentMethod, ShippingMethod
from .shop import ShopDetail
from .shop_context import ShopContext
from .tax import TaxRule

__all__ = [
    "ActiveCustomer",
    "Country",
    "CountryState",
    "Currency",
    "Customer",
    "CustomerAddress",
    "CustomerGroup",
    "PaymentMethod",
    "ShippingLocation",
    "ShippingMethod",
    "ShopContext",
    "ShopDetail",
    "TaxRule",
]
