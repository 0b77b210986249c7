"""
Gestion de sesiones de base de datos (origen de las ordenes).

El engine se crea en el primer uso para que importar la aplicacion no exija
un driver de base de datos instalado ni una conexion configurada.
"""
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base

from order_sheets.core.config import settings


# Base para modelos de SQLAlchemy
Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def _create_engine_args(database_url: str) -> dict:
    """
    Construye los argumentos del engine segun el tipo de base de datos.
    PostgreSQL usa pool de conexiones, SQLite no lo soporta.
    """
    args = {
        "echo": settings.DEBUG,
        "future": True,
    }

    # Configuracion de pool solo para PostgreSQL
    if "postgresql" in database_url:
        args.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_pre_ping": True,  # Verifica conexion antes de usar
        })

    return args


def get_engine() -> AsyncEngine:
    """Retorna el engine, creandolo si todavia no existe."""
    global _engine
    if _engine is None:
        database_url = settings.effective_database_url
        _engine = create_async_engine(database_url, **_create_engine_args(database_url))
    return _engine


def get_session_factory() -> async_sessionmaker:
    """Session factory ligada al engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False
        )
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Generador de sesiones de base de datos.
    Para usar como dependencia en FastAPI.

    Solo lectura: no hace commit, cierra la sesion al terminar.

    Yields:
        AsyncSession: Sesion de base de datos
    """
    async with get_session_factory()() as session:
        yield session


async def close_db() -> None:
    """Cierra las conexiones de la base de datos."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
