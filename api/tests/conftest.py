"""
Configuracion de fixtures para pytest.
"""
from typing import Any, AsyncGenerator, Dict, List, Optional, Sequence

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from order_sheets.application.interfaces.spreadsheet_gateway import SheetTab
from order_sheets.infrastructure.database import models  # noqa: F401  registra los modelos
from order_sheets.infrastructure.database.session import Base


# URL de base de datos de prueba
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Fixture que proporciona una sesion de base de datos para tests.
    Crea una base de datos en memoria para cada test.
    """
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


class FakeSpreadsheetGateway:
    """
    Hoja en memoria que registra cada llamada en orden.

    `fail_on` hace que la operacion indicada lance la excepcion dada.
    """

    def __init__(self, tabs: Optional[List[SheetTab]] = None) -> None:
        self.tabs: List[SheetTab] = list(tabs or [])
        self.values: Dict[str, List[List[Any]]] = {}
        self.calls: List[str] = []
        self.batch_requests: List[List[Dict[str, Any]]] = []
        self.value_input_options: List[str] = []
        self.fail_on: Dict[str, Exception] = {}
        self._next_sheet_id = 1000

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise self.fail_on[name]

    async def list_sheets(self) -> List[SheetTab]:
        self._check("list_sheets")
        return list(self.tabs)

    async def add_sheet(self, title: str) -> int:
        self._check("add_sheet")
        self._next_sheet_id += 1
        self.tabs.append(SheetTab(sheet_id=self._next_sheet_id, title=title))
        return self._next_sheet_id

    async def update_values(
        self,
        title: str,
        rows: Sequence[Sequence[Any]],
        *,
        value_input_option: str,
    ) -> None:
        self._check("update_values")
        self.values[title] = [list(row) for row in rows]
        self.value_input_options.append(value_input_option)

    async def clear_values(self, title: str) -> None:
        self._check("clear_values")
        self.values.pop(title, None)

    async def batch_update(
        self,
        requests: List[Dict[str, Any]],
        *,
        operation: str = "batchUpdate",
    ) -> Dict[str, Any]:
        self._check("batch_update")
        self.batch_requests.append(requests)
        return {"replies": [{} for _ in requests]}


@pytest.fixture
def fake_gateway() -> FakeSpreadsheetGateway:
    """Hoja en memoria vacia."""
    return FakeSpreadsheetGateway()
