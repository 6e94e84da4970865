"""
Request scopes for shop context resolution.

A scope is the set of optional overrides a caller supplies for a single
request: which shop and currency, which customer and addresses, and which
checkout selections (payment, shipping, destination preview).
"""

from dataclasses import dataclass

from storefront.utils.error_handler import ValidationException


@dataclass(frozen=True)
class ShopScope:
    """
    Identifies the shop of a request and an optional currency override.

    Attributes:
        shop_id: Shop identifier (required)
        currency_id: Currency the visitor switched to, if any

    Example:
        >>> ShopScope(shop_id="shop-de", currency_id="usd")
    """

    shop_id: str
    currency_id: str | None = None

    def __post_init__(self) -> None:
        """Validate scope after initialization."""
        if not self.shop_id:
            raise ValidationException(
                message="Shop scope requires a shop id",
                field="shop_id",
                invalid_value=self.shop_id,
            )


@dataclass(frozen=True)
class CustomerScope:
    """
    Identifies the logged-in customer and customer related overrides.

    Attributes:
        customer_id: Logged-in customer, None for guests
        customer_group_id: Customer group switch, wins over every other group
        billing_address_id: Billing address selected within checkout
        shipping_address_id: Shipping address selected within checkout
    """

    customer_id: str | None = None
    customer_group_id: str | None = None
    billing_address_id: str | None = None
    shipping_address_id: str | None = None

    @property
    def is_logged_in(self) -> bool:
        """Check if the scope names a customer."""
        return self.customer_id is not None

    @property
    def has_address_overrides(self) -> bool:
        """Check if billing or shipping address was switched."""
        return self.billing_address_id is not None or self.shipping_address_id is not None


@dataclass(frozen=True)
class CheckoutScope:
    """
    Checkout selections; country and state allow guests to preview a calculation.

    Attributes:
        payment_method_id: Payment method selected within checkout
        shipping_method_id: Shipping method selected within checkout
        country_id: Destination country preview (guests only)
        state_id: Destination state preview (guests only), wins over country_id
    """

    payment_method_id: str | None = None
    shipping_method_id: str | None = None
    country_id: str | None = None
    state_id: str | None = None
