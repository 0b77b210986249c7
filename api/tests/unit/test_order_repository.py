"""
Tests unitarios para OrderRepository sobre SQLite en memoria.

Las claves son UUID (tipo por defecto de DB_ID_TYPE).
"""
from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from order_sheets.domain.entities.order import Order
from order_sheets.infrastructure.database.models import (
    OrderModel,
    PurchaseImageModel,
    PurchaseLinkModel,
    PurchaseModel,
    RecordId,
)
from order_sheets.infrastructure.repositories.order_repository import OrderRepository
from order_sheets.shared.exceptions.upstream import RecordSourceException

ORDER_ID = "0b7c6a52-3f1e-4d8a-9a55-6f4b3c2d1e00"
EMPTY_ORDER_ID = "0b7c6a52-3f1e-4d8a-9a55-6f4b3c2d1eff"
PURCHASE_1 = "11111111-1111-4111-8111-111111111111"
PURCHASE_2 = "22222222-2222-4222-8222-222222222222"


def _ts(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 5, 1, hour, minute)


async def _seed(session) -> None:
    session.add(OrderModel(id=ORDER_ID, order_name="Order 1"))
    session.add_all([
        PurchaseModel(
            id=PURCHASE_2,
            order_id=ORDER_ID,
            customer_name="Omar",
            qty=1,
            price=9.5,
            picked_up=False,
            collected=True,
            collected_at=_ts(12, 30),
        ),
        PurchaseModel(
            id=PURCHASE_1,
            order_id=ORDER_ID,
            customer_name="Sara",
            qty=3,
            price=20,
            pickup_point="Point A",
            note="fragile",
            picked_up=True,
            picked_up_at=_ts(11),
        ),
    ])
    session.add_all([
        PurchaseLinkModel(purchase_id=PURCHASE_1, url="https://a.example"),
        PurchaseLinkModel(purchase_id=PURCHASE_1, url="https://b.example"),
        PurchaseImageModel(purchase_id=PURCHASE_1, storage_path="p-1/1.jpg"),
        PurchaseImageModel(purchase_id=PURCHASE_1, storage_path="p-1/2.jpg"),
    ])
    await session.commit()


@pytest.mark.asyncio
async def test_loads_order_with_purchases(db_session) -> None:
    await _seed(db_session)

    order = await OrderRepository(db_session).get_with_purchases(ORDER_ID)

    assert isinstance(order, Order)
    assert order.id == ORDER_ID
    assert order.order_name == "Order 1"
    assert [p.id for p in order.purchases] == [PURCHASE_1, PURCHASE_2]


@pytest.mark.asyncio
async def test_links_and_images_are_loaded(db_session) -> None:
    await _seed(db_session)

    order = await OrderRepository(db_session).get_with_purchases(ORDER_ID)
    first = order.purchases[0]

    assert first.links == ["https://a.example", "https://b.example"]
    assert first.images == ["p-1/1.jpg", "p-1/2.jpg"]
    assert order.purchases[1].links == []
    assert order.purchases[1].images == []
    assert order.max_images == 2


@pytest.mark.asyncio
async def test_purchase_fields_are_mapped(db_session) -> None:
    await _seed(db_session)

    order = await OrderRepository(db_session).get_with_purchases(ORDER_ID)
    first, second = order.purchases

    assert first.customer_name == "Sara"
    assert first.qty == 3
    assert first.price == 20
    assert first.pickup_point == "Point A"
    assert first.note == "fragile"
    assert first.picked_up is True
    assert first.picked_up_at.startswith("2024-05-01T11:00:00")
    assert first.collected is None
    assert first.collected_at is None
    assert second.collected is True
    assert second.collected_at.startswith("2024-05-01T12:30:00")


@pytest.mark.asyncio
async def test_order_without_purchases(db_session) -> None:
    db_session.add(OrderModel(id=EMPTY_ORDER_ID))
    await db_session.commit()

    order = await OrderRepository(db_session).get_with_purchases(EMPTY_ORDER_ID)

    assert order.purchases == []
    assert order.display_name == EMPTY_ORDER_ID


@pytest.mark.asyncio
async def test_unknown_order_returns_none(db_session) -> None:
    missing = "99999999-9999-4999-8999-999999999999"

    assert await OrderRepository(db_session).get_with_purchases(missing) is None


@pytest.mark.asyncio
async def test_database_error_is_wrapped() -> None:
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))

    with pytest.raises(RecordSourceException) as exc_info:
        await OrderRepository(session).get_with_purchases(ORDER_ID)

    assert exc_info.value.error_code == "RECORD_SOURCE_FAILURE"
    assert exc_info.value.status_code == 502


class TestRecordId:
    """El tipo de las claves sigue al esquema real y se expone como str."""

    def test_native_types_on_postgresql(self) -> None:
        dialect = postgresql.dialect()

        assert RecordId("uuid").load_dialect_impl(dialect).__visit_name__ == "uuid"
        assert RecordId("bigint").load_dialect_impl(dialect).__visit_name__ == "big_integer"
        assert RecordId("text").load_dialect_impl(dialect).__visit_name__ == "text"

    def test_bigint_keys_are_bound_as_int(self) -> None:
        assert RecordId("bigint").process_bind_param("42", None) == 42

    def test_keys_are_returned_as_str(self) -> None:
        assert RecordId("bigint").process_result_value(42, None) == "42"
        assert RecordId("uuid").process_result_value(ORDER_ID, None) == ORDER_ID

    def test_unknown_kind_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            RecordId("varchar")

    def test_no_mapped_column_requires_created_at(self) -> None:
        for model in (OrderModel, PurchaseModel, PurchaseLinkModel, PurchaseImageModel):
            assert "created_at" not in model.__table__.c
