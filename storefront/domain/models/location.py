"""
Country, state and shipping location models.

A ShippingLocation describes where a delivery computation applies: always a
country, optionally a state and the concrete address it was derived from.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .customer import CustomerAddress


@dataclass(frozen=True)
class Country:
    """Country a shop can deliver to."""

    id: str
    iso: str
    name: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class CountryState:
    """State or region of a country."""

    id: str
    country_id: str
    short_code: str = ""
    name: str = ""


@dataclass(frozen=True)
class ShippingLocation:
    """
    Destination descriptor used for delivery and tax computation.

    Attributes:
        country: Destination country
        state: Destination state, if known
        address: Customer address the location was built from, if any
    """

    country: Country
    state: Optional[CountryState] = None
    address: Optional["CustomerAddress"] = None

    def __post_init__(self) -> None:
        """Validate location consistency."""
        if self.state is not None and self.state.country_id != self.country.id:
            raise ValueError(f"State {self.state.id} does not belong to country {self.country.id}")

    @classmethod
    def from_address(cls, address: "CustomerAddress") -> "ShippingLocation":
        """Create a location from a customer address (country and state taken from it)."""
        return cls(country=address.country, state=address.state, address=address)

    @classmethod
    def from_country(cls, country: Country) -> "ShippingLocation":
        """Create a location covering a whole country."""
        return cls(country=country)
