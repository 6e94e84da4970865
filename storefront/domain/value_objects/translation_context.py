"""TranslationContext value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TranslationContext:
    """
    Locale descriptor that controls which translated values lookups return.

    Attributes:
        shop_id: Shop whose translations are requested
        is_default_shop: Whether the shop is the default shop
        fallback_id: Shop whose translations fill the gaps, if any
    """

    shop_id: str
    is_default_shop: bool
    fallback_id: str | None = None

    @property
    def has_fallback(self) -> bool:
        """Check if a fallback translation is configured."""
        return self.fallback_id is not None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "TranslationContext":
        """
        Create from a raw shop row.

        The row carries ``uuid``, ``is_default`` and ``fallback_translation_uuid``;
        an empty fallback value means no fallback.
        """
        return cls(
            shop_id=str(row["uuid"]),
            is_default_shop=bool(row["is_default"]),
            fallback_id=row.get("fallback_translation_uuid") or None,
        )
