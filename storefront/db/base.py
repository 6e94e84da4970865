"""
Base Repository for database operations.

This module provides an abstract base class for repository classes,
implementing connection checks, session handling, retries and
operation logging.
"""

import asyncio
import functools
import logging
from abc import ABC, abstractmethod
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import get_settings
from storefront.db.connection import ConnDB, get_db_connection
from storefront.utils.error_handler import DatabaseConnectionException

logger = logging.getLogger(__name__)


def with_retry(
    max_attempts: Optional[int] = None,
    delay: Optional[float] = None,
    backoff: Optional[float] = None,
    exceptions: tuple = (DatabaseConnectionException,),
) -> Callable:
    """
    Decorator for retrying database operations with exponential backoff.

    Values left as None are read from settings (MAX_RETRIES,
    RETRY_DELAY_SECONDS, RETRY_BACKOFF_FACTOR) when the call happens.

    Args:
        max_attempts: Maximum number of attempts
        delay: Initial delay between retries in seconds
        backoff: Multiplier for exponential backoff
        exceptions: Tuple of exceptions to catch and retry

    Returns:
        Decorated function with retry logic
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            settings = get_settings()
            attempts = max_attempts or settings.MAX_RETRIES
            current_delay = settings.RETRY_DELAY_SECONDS if delay is None else delay
            factor = settings.RETRY_BACKOFF_FACTOR if backoff is None else backoff

            for attempt in range(attempts):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt == attempts - 1:
                        logger.error(f"All {attempts} attempts failed for {func.__name__}")
                        raise
                    logger.warning(
                        f"Attempt {attempt + 1}/{attempts} failed for {func.__name__}: {e}. "
                        f"Retrying in {current_delay:.1f}s..."
                    )
                    await asyncio.sleep(current_delay)
                    current_delay *= factor

        return wrapper

    return decorator


def log_operation(operation_name: Optional[str] = None) -> Callable:
    """
    Decorator for logging database operations.

    Args:
        operation_name: Optional custom name for the operation

    Returns:
        Decorated function with logging
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            op_name = operation_name or f"{self.__class__.__name__}.{func.__name__}"
            logger.debug(f"Starting operation: {op_name}")

            try:
                result = await func(self, *args, **kwargs)
                logger.debug(f"Operation successful: {op_name}")
                return result
            except Exception as e:
                logger.error(f"Operation failed: {op_name} - {e}")
                raise

        return wrapper

    return decorator


class BaseRepository(ABC):
    """
    Abstract base repository.

    Derived repositories implement _verify_table_access() and use
    get_session() for their queries.
    """

    def __init__(self, conn_db: Optional[ConnDB] = None):
        """
        Initialize the base repository.

        Args:
            conn_db: Optional database connection. If not provided, uses the shared connection.
        """
        self.conn_db: ConnDB = conn_db or get_db_connection()
        self._initialized: bool = False
        self._repository_name: str = self.__class__.__name__

    @log_operation("repository_initialization")
    async def initialize(self) -> None:
        """
        Initialize the repository ensuring database connection is available.

        Raises:
            DatabaseConnectionException: If initialization fails
        """
        try:
            if not self.conn_db.is_initialized():
                await self.conn_db.initialize()

            await self._verify_table_access()

            self._initialized = True
            logger.info(f"{self._repository_name} initialized successfully")

        except DatabaseConnectionException:
            raise
        except Exception as e:
            raise DatabaseConnectionException(
                message=f"Failed to initialize {self._repository_name}: {str(e)}",
                db_host=self.conn_db.settings.database_host,
                connection_type="repository_initialization",
            ) from e

    @abstractmethod
    async def _verify_table_access(self) -> None:
        """
        Verify access to the tables required by this repository.

        Raises:
            DatabaseConnectionException: If table access verification fails
        """

    def is_initialized(self) -> bool:
        """Check if the repository is initialized and ready for operations."""
        return self._initialized and self.conn_db.is_initialized()

    def get_session(self) -> AsyncContextManager[AsyncSession]:
        """
        Get a database session from the connection pool.

        Raises:
            DatabaseConnectionException: If repository is not initialized
        """
        if not self.is_initialized():
            raise DatabaseConnectionException(
                message=f"{self._repository_name} not initialized",
                db_host=self.conn_db.settings.database_host,
                connection_type="session_acquisition",
            )

        return self.conn_db.get_session()

    def __repr__(self) -> str:
        """String representation of the repository."""
        return f"<{self._repository_name}(initialized={self._initialized})>"
