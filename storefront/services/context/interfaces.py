"""
Interfaces/Protocols for the collaborators of context resolution (Dependency Inversion Principle).

These protocols define the read-only lookups the resolver depends on,
allowing any storage backend (or a test double) to be plugged in.
"""

from typing import Any, Iterable, Mapping, Protocol, Sequence, TypeVar

from storefront.domain.models import ShopDetail, TaxRule
from storefront.domain.value_objects import TranslationContext

T_co = TypeVar("T_co", covariant=True)


class IShopLookup(Protocol):
    """Protocol for reading a shop together with its defaults."""

    async def read_detail(self, shop_id: str, context: TranslationContext) -> ShopDetail | None:
        """Read shop detail, None if the shop does not exist."""
        ...


class IEntityLookup(Protocol[T_co]):
    """
    Protocol for basic entity lookups by identifier.

    Unknown identifiers are simply absent from the returned mapping;
    a lookup never raises because an identifier does not exist.
    """

    async def read_basic(self, ids: Sequence[str], context: TranslationContext) -> Mapping[str, T_co]:
        """Read entities by id, return mapping id -> entity."""
        ...


class ITaxRuleLookup(Protocol):
    """Protocol for searching tax rules."""

    async def search(self, context: TranslationContext) -> Iterable[TaxRule]:
        """Return every tax rule."""
        ...


class ITranslationContextStore(Protocol):
    """Protocol for the raw shop row backing a translation context."""

    async def fetch_shop_row(self, shop_id: str) -> dict[str, Any] | None:
        """Return uuid, is_default and fallback_translation_uuid of a shop, None if absent."""
        ...
