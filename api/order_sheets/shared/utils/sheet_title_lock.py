"""
Lock por titulo de pestana.

Serializa el "buscar o crear" de una pestana entre pasadas concurrentes del
mismo proceso (por ejemplo, entregas duplicadas de un webhook). No coordina
entre instancias distintas del servicio.

Caracteristicas:
- Un asyncio.Lock por titulo, creado bajo demanda
- Timeout configurable para evitar esperas indefinidas
- El lock de un titulo se descarta cuando ya nadie lo usa ni lo espera
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from loguru import logger

from order_sheets.shared.exceptions.base import AppException


# Timeout por defecto para adquirir un lock (en segundos)
DEFAULT_LOCK_TIMEOUT = 30.0


class SheetTitleLockTimeoutError(AppException):
    """Excepcion lanzada cuando no se puede adquirir el lock dentro del timeout."""

    def __init__(self, title: str, timeout: float):
        self.title = title
        self.timeout = timeout
        super().__init__(
            message=f"Timeout ({timeout}s) acquiring sheet lock for title: {title}",
            status_code=503,
            error_code="SHEET_LOCK_TIMEOUT",
            details={"title": title, "timeout": timeout},
        )


class SheetTitleLockManager:
    """
    Gestor de locks por titulo.

    Los locks viven en la instancia; la aplicacion crea un unico gestor al
    iniciar y lo comparte entre requests. `_users` cuenta quienes tienen o
    esperan cada lock, asi el registro no crece con cada titulo visto.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_LOCK_TIMEOUT) -> None:
        self._timeout = timeout
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    def _checkout(self, title: str) -> asyncio.Lock:
        lock = self._locks.get(title)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[title] = lock
        self._users[title] = self._users.get(title, 0) + 1
        return lock

    def _checkin(self, title: str) -> None:
        remaining = self._users.get(title, 0) - 1
        if remaining > 0:
            self._users[title] = remaining
            return
        self._users.pop(title, None)
        self._locks.pop(title, None)

    @asynccontextmanager
    async def lock(self, title: str) -> AsyncIterator[None]:
        """
        Context manager async para adquirir el lock de un titulo.

        Raises:
            SheetTitleLockTimeoutError: Si no se adquiere dentro del timeout.

        Ejemplo:
            async with locks.lock("Order #12"):
                sheet_id = await gateway.add_sheet("Order #12")
        """
        lock = self._checkout(title)

        try:
            if self._timeout and self._timeout > 0:
                try:
                    await asyncio.wait_for(lock.acquire(), timeout=self._timeout)
                except asyncio.TimeoutError:
                    logger.warning(f"Timeout adquiriendo lock para pestana '{title}' (timeout: {self._timeout}s)")
                    raise SheetTitleLockTimeoutError(title, self._timeout)
            else:
                await lock.acquire()

            try:
                yield
            finally:
                lock.release()
        finally:
            self._checkin(title)

    def get_active_locks_count(self) -> int:
        """Retorna el numero de locks registrados (para monitoreo)."""
        return len(self._locks)
