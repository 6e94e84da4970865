"""
Customer domain models.

Customer records are read-only snapshots. Address switches made within the
checkout never touch the snapshot itself; they are combined with it into an
ActiveCustomer view.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from .location import Country, CountryState
from .methods import PaymentMethod


@dataclass(frozen=True)
class CustomerGroup:
    """
    Customer group, controls gross/net display and group discounts.

    Attributes:
        id: Group identifier (e.g. "EK")
        name: Display name
        display_gross: Whether prices are shown including tax
        input_gross: Whether prices are entered including tax
        percentage_discount: Group wide discount in percent
    """

    id: str
    name: str = ""
    display_gross: bool = True
    input_gross: bool = True
    percentage_discount: Decimal = Decimal("0")


@dataclass(frozen=True)
class CustomerAddress:
    """Postal address of a customer."""

    id: str
    customer_id: str
    country: Country
    state: Optional[CountryState] = None
    first_name: str = ""
    last_name: str = ""
    street: str = ""
    zip_code: str = ""
    city: str = ""
    company: str = ""

    @property
    def full_name(self) -> str:
        """Get recipient name."""
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class Customer:
    """
    Domain model representing a registered (or guest-registered) customer.

    Attributes:
        id: Customer identifier
        email: Customer email address
        group: Customer group the customer belongs to
        default_billing_address: Billing address chosen at registration
        default_shipping_address: Shipping address chosen at registration
        number: Customer number
        first_name: Customer first name
        last_name: Customer last name
        default_payment_method: Payment method chosen at registration
        last_payment_method: Payment method of the last order
        is_guest: Whether the account is a guest account
    """

    id: str
    email: str
    group: CustomerGroup
    default_billing_address: CustomerAddress
    default_shipping_address: CustomerAddress
    number: str = ""
    first_name: str = ""
    last_name: str = ""
    default_payment_method: Optional[PaymentMethod] = None
    last_payment_method: Optional[PaymentMethod] = None
    is_guest: bool = False

    def __post_init__(self) -> None:
        """Validate customer data after initialization."""
        if self.email and "@" not in self.email:
            raise ValueError(f"Invalid email format: {self.email}")

    @property
    def full_name(self) -> str:
        """Get customer's full name."""
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class ActiveCustomer:
    """
    A customer together with the addresses active for the current request.

    Built from a Customer snapshot plus optional checkout address switches.
    The wrapped Customer is shared, never modified.

    Attributes:
        customer: Underlying customer snapshot
        active_billing_address: Billing address used for this request
        active_shipping_address: Shipping address used for this request
    """

    customer: Customer
    active_billing_address: CustomerAddress
    active_shipping_address: CustomerAddress

    @classmethod
    def from_customer(
        cls,
        customer: Customer,
        billing_address: Optional[CustomerAddress] = None,
        shipping_address: Optional[CustomerAddress] = None,
    ) -> "ActiveCustomer":
        """
        Combine a customer with address overrides.

        Args:
            customer: Customer snapshot
            billing_address: Billing address override, defaults to the customer's default
            shipping_address: Shipping address override, defaults to the customer's default

        Returns:
            ActiveCustomer: New view, the customer snapshot is left untouched
        """
        return cls(
            customer=customer,
            active_billing_address=billing_address or customer.default_billing_address,
            active_shipping_address=shipping_address or customer.default_shipping_address,
        )

    @property
    def id(self) -> str:
        return self.customer.id

    @property
    def group(self) -> CustomerGroup:
        return self.customer.group

    @property
    def last_payment_method(self) -> Optional[PaymentMethod]:
        return self.customer.last_payment_method

    @property
    def default_payment_method(self) -> Optional[PaymentMethod]:
        return self.customer.default_payment_method

    def to_dict(self) -> dict[str, Any]:
        """Convert to an identifier summary."""
        return {
            "id": self.customer.id,
            "email": self.customer.email,
            "group_id": self.customer.group.id,
            "active_billing_address_id": self.active_billing_address.id,
            "active_shipping_address_id": self.active_shipping_address.id,
        }
