"""TranslationContextProvider service - SRP compliance."""

import logging

from storefront.domain.value_objects import TranslationContext
from storefront.services.context.interfaces import ITranslationContextStore
from storefront.utils.error_handler import ShopNotFoundException

logger = logging.getLogger(__name__)


class TranslationContextProvider:
    """Resolves the translation context of a shop (SRP: locale fallback only)."""

    def __init__(self, store: ITranslationContextStore):
        """
        Initialize with the raw shop row store (DIP).

        Args:
            store: Store reading the shop translation row
        """
        self.store = store

    async def resolve(self, shop_id: str) -> TranslationContext:
        """
        Resolve the translation context for a shop.

        Returns:
            TranslationContext: Locale and fallback of the shop

        Raises:
            ShopNotFoundException: If the shop row does not exist
        """
        row = await self.store.fetch_shop_row(shop_id)
        if row is None:
            logger.warning(f"No translation row for shop {shop_id}")
            raise ShopNotFoundException(shop_id=shop_id)

        context = TranslationContext.from_row(row)
        logger.debug(
            f"Translation context for shop {shop_id}: default={context.is_default_shop}, "
            f"fallback={context.fallback_id}"
        )
        return context
