"""Currency domain model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Currency:
    """
    Currency a shop can sell in.

    Attributes:
        id: Currency identifier
        iso_code: ISO 4217 code (e.g. "EUR")
        symbol: Display symbol
        factor: Conversion factor relative to the default currency
        name: Translated name
        is_default: Whether this is the system default currency
    """

    id: str
    iso_code: str
    symbol: str = ""
    factor: Decimal = Decimal("1")
    name: str = ""
    is_default: bool = False

    def __post_init__(self) -> None:
        """Validate currency data after initialization."""
        if not isinstance(self.factor, Decimal):
            object.__setattr__(self, "factor", Decimal(str(self.factor)))

        if self.factor <= 0:
            raise ValueError(f"Currency factor must be positive: {self.factor}")

        if len(self.iso_code) != 3:
            raise ValueError(f"Invalid currency code: {self.iso_code}")
