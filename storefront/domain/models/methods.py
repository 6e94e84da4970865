"""Payment and shipping method domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentMethod:
    """
    Payment method offered in checkout.

    Attributes:
        id: Payment method identifier
        technical_name: Internal handler name (e.g. "invoice")
        name: Translated display name
        is_active: Whether the method can currently be selected
    """

    id: str
    technical_name: str
    name: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class ShippingMethod:
    """
    Shipping (delivery) method offered in checkout.

    Attributes:
        id: Shipping method identifier
        name: Translated display name
        type: Calculation type of the method
        is_active: Whether the method can currently be selected
    """

    id: str
    name: str = ""
    type: int = 0
    is_active: bool = True
