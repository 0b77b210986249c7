"""
Manejadores de eventos de inicio y cierre de la aplicacion.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List

from fastapi import FastAPI
from loguru import logger

from order_sheets.core.config import Settings, settings
from order_sheets.infrastructure.database.session import close_db


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Configura logging y valida la configuracion critica."""
        logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Entorno: {settings.ENVIRONMENT}")

        for warning in validate_config(settings):
            logger.warning(f"CONFIG: {warning}")

        # Logging a archivo
        logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            level=settings.LOG_LEVEL
        )

        logger.info(
            f"Imagenes: modo {settings.IMAGE_CELL_MODE.value}, "
            f"formato: {'si' if settings.FORMAT_SHEETS else 'no'}, "
            f"limpiar filas previas: {'si' if settings.CLEAR_STALE_ROWS else 'no'}"
        )
        logger.success("Aplicacion iniciada correctamente")

    return startup


def validate_config(config: Settings) -> List[str]:
    """
    Valida que la configuracion critica este presente.

    Returns:
        Lista de advertencias (vacia si todo esta configurado)
    """
    warnings = []

    if not config.GOOGLE_SHEET_ID:
        warnings.append("GOOGLE_SHEET_ID no configurado - el sync fallara")
    if not config.GOOGLE_SERVICE_ACCOUNT_EMAIL or not config.GOOGLE_PRIVATE_KEY:
        warnings.append("Credenciales de la cuenta de servicio de Google incompletas")
    if not config.SUPABASE_URL:
        warnings.append("SUPABASE_URL no configurada - las URLs de imagenes seran relativas")

    return warnings


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera recursos al cerrar la aplicacion."""
        logger.info("Cerrando aplicacion...")

        await close_db()
        logger.info("Conexiones de base de datos cerradas")

        logger.success("Aplicacion cerrada correctamente")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ciclo de vida de la aplicacion: inicio, requests, cierre."""
    await startup_handler(app)()
    try:
        yield
    finally:
        await shutdown_handler(app)()
