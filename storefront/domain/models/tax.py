"""Tax rule domain model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TaxRule:
    """
    Tax rate applicable to cart calculation.

    Attributes:
        id: Tax identifier
        rate: Rate in percent (e.g. Decimal("19"))
        name: Display name
    """

    id: str
    rate: Decimal
    name: str = ""

    def __post_init__(self) -> None:
        """Validate tax data after initialization."""
        if not isinstance(self.rate, Decimal):
            object.__setattr__(self, "rate", Decimal(str(self.rate)))

        if self.rate < 0:
            raise ValueError(f"Tax rate cannot be negative: {self.rate}")
