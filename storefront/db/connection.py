# storefront/db/connection.py
"""
Clase ConnDB para gestión exclusiva de conexiones a la base de datos de la tienda.

Esta clase maneja únicamente la conexión, configuración del pool
y ciclo de vida de las conexiones.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from storefront.core.config import Settings, get_settings
from storefront.utils.error_handler import DatabaseConnectionException

logger = logging.getLogger(__name__)


class ConnDB:
    """
    Clase para gestión exclusiva de conexiones a la base de datos.

    Se comparte una instancia por proceso a través de get_db_connection();
    los tests pueden crear instancias propias con otra configuración.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Inicializa la clase ConnDB."""
        self.settings = settings or get_settings()
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self.connection_string = self.settings.DATABASE_URL
        self._connection_tested = False
        logger.info("ConnDB instance created")

    async def initialize(self):
        """
        Inicializa el engine de base de datos y el pool de conexiones.

        Raises:
            DatabaseConnectionException: Si falla la inicialización
        """
        try:
            if self.engine is not None:
                logger.info("Database connection already initialized")
                return

            logger.info("Initializing database connection...")

            self.engine = create_async_engine(
                self.connection_string,
                pool_size=self.settings.DB_POOL_SIZE,
                max_overflow=20,
                pool_pre_ping=True,  # Verificar conexiones antes de usar
                pool_recycle=3600,  # Reciclar conexiones cada hora
                pool_timeout=self.settings.DB_CONNECTION_TIMEOUT,
                echo=self.settings.DEBUG,
            )

            self.session_factory = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

            await self._test_connection()

            logger.info("Database connection initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            await self._cleanup_failed_initialization()
            raise DatabaseConnectionException(
                message=f"Failed to initialize database connection: {str(e)}",
                db_host=self.settings.database_host,
                connection_type="initialization",
            ) from e

    async def _test_connection(self):
        """
        Prueba la conexión a la base de datos.

        Raises:
            DatabaseConnectionException: Si la prueba de conexión falla
        """
        async with self.session_factory() as session:
            result = await session.execute(text("SELECT 1 AS test_connection"))
            if result.scalar() != 1:
                raise DatabaseConnectionException(
                    message="Connection test returned unexpected value",
                    db_host=self.settings.database_host,
                    connection_type="test",
                )
        self._connection_tested = True

    async def _cleanup_failed_initialization(self):
        """Limpia recursos en caso de fallo de inicialización."""
        if self.engine:
            await self.engine.dispose()
        self.engine = None
        self.session_factory = None
        self._connection_tested = False

    def get_session(self) -> AsyncSession:
        """
        Obtiene una nueva sesión de base de datos.

        Returns:
            AsyncSession: Sesión asíncrona de SQLAlchemy

        Raises:
            DatabaseConnectionException: Si no hay conexión inicializada
        """
        if not self.is_initialized():
            raise DatabaseConnectionException(
                message="Database connection not initialized. Call initialize() first.",
                db_host=self.settings.database_host,
                connection_type="session_creation",
            )

        return self.session_factory()

    def is_initialized(self) -> bool:
        """
        Verifica si la conexión está inicializada.

        Returns:
            bool: True si está inicializada y probada
        """
        return self.engine is not None and self.session_factory is not None and self._connection_tested

    async def close(self):
        """
        Cierra la conexión y limpia todos los recursos.
        """
        logger.info("Closing database connection...")

        if self.engine:
            await self.engine.dispose()

        self.engine = None
        self.session_factory = None
        self._connection_tested = False

        logger.info("Database connection closed successfully")


_db_connection: Optional[ConnDB] = None


def get_db_connection() -> ConnDB:
    """
    Obtiene la instancia compartida de ConnDB.

    Returns:
        ConnDB: Conexión compartida del proceso
    """
    global _db_connection
    if _db_connection is None:
        _db_connection = ConnDB()
    return _db_connection
