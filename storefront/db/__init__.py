"""
Database access package.

- ConnDB: async engine and session management
- BaseRepository: connection checks, retries and operation logging
- SqlTranslationContextStore: shop translation rows
"""

from .base import BaseRepository
from .connection import ConnDB, get_db_connection
from .translation_context_store import SqlTranslationContextStore

__all__ = ["BaseRepository", "ConnDB", "get_db_connection", "SqlTranslationContextStore"]
