"""
SqlTranslationContextStore: raw read of the shop translation row.

Backs TranslationContextProvider with a single query against the shop table.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text

from storefront.db.base import BaseRepository, log_operation, with_retry
from storefront.utils.error_handler import DatabaseConnectionException

logger = logging.getLogger(__name__)

SHOP_TRANSLATION_QUERY = """
SELECT uuid, is_default, fallback_translation_uuid
FROM shop
WHERE uuid = :uuid
"""


class SqlTranslationContextStore(BaseRepository):
    """Repository reading shop translation rows."""

    @log_operation("verify_table_access_shop")
    async def _verify_table_access(self) -> None:
        async with self.conn_db.get_session() as session:
            await session.execute(text("SELECT COUNT(*) FROM shop"))

    @with_retry()
    @log_operation()
    async def fetch_shop_row(self, shop_id: str) -> Optional[Dict[str, Any]]:
        """
        Read uuid, is_default and fallback_translation_uuid of a shop.

        Returns:
            dict | None: Row as dict, None if the shop does not exist

        Raises:
            DatabaseConnectionException: If the query fails
        """
        try:
            async with self.get_session() as session:
                result = await session.execute(text(SHOP_TRANSLATION_QUERY), {"uuid": shop_id})
                row = result.mappings().first()
        except DatabaseConnectionException:
            raise
        except Exception as e:
            raise DatabaseConnectionException(
                message=f"Failed to read translation row of shop {shop_id}: {str(e)}",
                db_host=self.conn_db.settings.database_host,
                connection_type="query_execution",
            ) from e

        if row is None:
            logger.debug(f"Shop {shop_id} not found in shop table")
            return None

        return dict(row)
