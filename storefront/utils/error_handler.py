"""
Sistema de manejo de errores personalizado.

Este módulo define todas las excepciones personalizadas de la aplicación
y proporciona utilidades para manejo consistente de errores.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados para la aplicación.
    """

    # Errores generales
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Errores de conexión
    DATABASE_CONNECTION_FAILED = "DATABASE_CONNECTION_FAILED"
    DATABASE_QUERY_FAILED = "DATABASE_QUERY_FAILED"

    # Errores de resolución de contexto
    SHOP_NOT_FOUND = "SHOP_NOT_FOUND"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones personalizadas de la aplicación.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
        is_critical: bool = False,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            status_code: Código HTTP asociado
            severity: Severidad del error
            is_retryable: Si la operación puede reintentarse
            is_critical: Si requiere alerta inmediata
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.is_critical = is_critical
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "is_critical": self.is_critical,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class ValidationException(AppException):
    """
    Excepción para errores de validación de datos.
    """

    def __init__(
        self,
        message: str,
        field: str,
        invalid_value: Any = None,
        expected_format: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de validación.

        Args:
            message: Mensaje de error
            field: Campo que falló la validación
            invalid_value: Valor que causó el error
            expected_format: Formato esperado
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.field = field
        self.invalid_value = invalid_value
        self.expected_format = expected_format

        self.details.update(
            {
                "field": field,
                "invalid_value": str(invalid_value) if invalid_value is not None else None,
                "expected_format": expected_format,
            }
        )


class DatabaseConnectionException(AppException):
    """
    Excepción para errores de conexión o consulta con la base de datos.
    """

    def __init__(
        self,
        message: str,
        db_host: Optional[str] = None,
        connection_type: str = "database",
        **kwargs,
    ):
        """
        Inicializa la excepción de conexión.

        Args:
            message: Mensaje de error
            db_host: Host de la base de datos
            connection_type: Tipo de conexión u operación
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.DATABASE_CONNECTION_FAILED,
            status_code=503,
            severity=ErrorSeverity.HIGH,
            is_retryable=True,
            is_critical=True,
            **kwargs,
        )
        self.db_host = db_host
        self.connection_type = connection_type

        self.details.update({"db_host": db_host, "connection_type": connection_type})


class ShopNotFoundException(AppException):
    """
    La tienda solicitada no existe: la resolución del contexto se aborta.
    """

    def __init__(self, shop_id: str, **kwargs):
        """
        Inicializa la excepción.

        Args:
            shop_id: Identificador de la tienda no encontrada
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=f"Shop with id {shop_id} not found or not valid",
            error_code=ErrorCode.SHOP_NOT_FOUND,
            status_code=404,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.shop_id = shop_id
        self.details.update({"shop_id": shop_id})


def handle_exception(exc: Exception, context: Optional[Dict[str, Any]] = None) -> AppException:
    """
    Normaliza cualquier excepción a AppException y la registra.

    Args:
        exc: Excepción original
        context: Información adicional del contexto donde ocurrió

    Returns:
        AppException: Excepción normalizada
    """
    if isinstance(exc, AppException):
        app_exc = exc
    else:
        app_exc = AppException(
            message=str(exc) or exc.__class__.__name__,
            details={"original_type": exc.__class__.__name__},
        )

    if context:
        app_exc.details.setdefault("context", context)

    log_level = logging.ERROR
    if app_exc.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM):
        log_level = logging.WARNING

    logger.log(
        log_level,
        f"{app_exc.error_code.value}: {app_exc.message}",
        extra={"error_details": app_exc.details},
    )
    if app_exc.is_critical:
        logger.debug("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))

    return app_exc
