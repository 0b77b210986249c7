"""
Tests unitarios para sheet_title_lock.py.

Verifica la serializacion por titulo y el timeout de adquisicion.
"""
from __future__ import annotations

import asyncio
from typing import List

import pytest

from order_sheets.shared.exceptions.base import AppException
from order_sheets.shared.utils.sheet_title_lock import (
    DEFAULT_LOCK_TIMEOUT,
    SheetTitleLockManager,
    SheetTitleLockTimeoutError,
)


class TestSheetTitleLockTimeoutError:
    def test_exception_message_contains_title_and_timeout(self) -> None:
        error = SheetTitleLockTimeoutError("Order 1", 30.0)

        assert "Order 1" in str(error)
        assert "30.0" in str(error)
        assert error.title == "Order 1"
        assert error.timeout == 30.0

    def test_exception_is_a_structured_app_error(self) -> None:
        error = SheetTitleLockTimeoutError("Order 1", 5.0)

        assert isinstance(error, AppException)
        assert error.status_code == 503
        assert error.error_code == "SHEET_LOCK_TIMEOUT"
        assert error.details == {"title": "Order 1", "timeout": 5.0}


class TestSheetTitleLockManager:
    def test_default_timeout(self) -> None:
        assert SheetTitleLockManager()._timeout == DEFAULT_LOCK_TIMEOUT

    @pytest.mark.asyncio
    async def test_lock_creates_lock_for_title(self) -> None:
        locks = SheetTitleLockManager()

        async with locks.lock("Order 1"):
            assert "Order 1" in locks._locks
            assert locks._locks["Order 1"].locked()

        assert "Order 1" not in locks._locks

    @pytest.mark.asyncio
    async def test_same_title_is_serialized(self) -> None:
        locks = SheetTitleLockManager()
        events: List[str] = []

        async def worker(name: str) -> None:
            async with locks.lock("Order 1"):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        await asyncio.gather(worker("a"), worker("b"))

        assert events in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )

    @pytest.mark.asyncio
    async def test_different_titles_run_concurrently(self) -> None:
        locks = SheetTitleLockManager()
        events: List[str] = []

        async def worker(title: str) -> None:
            async with locks.lock(title):
                events.append(f"{title}-start")
                await asyncio.sleep(0.01)
                events.append(f"{title}-end")

        await asyncio.gather(worker("A"), worker("B"))

        assert events[:2] == ["A-start", "B-start"]

    @pytest.mark.asyncio
    async def test_timeout_raises(self) -> None:
        locks = SheetTitleLockManager(timeout=0.05)

        async with locks.lock("Order 1"):
            with pytest.raises(SheetTitleLockTimeoutError) as exc_info:
                async with locks.lock("Order 1"):
                    pass

        assert exc_info.value.title == "Order 1"

    @pytest.mark.asyncio
    async def test_lock_is_released_on_error(self) -> None:
        locks = SheetTitleLockManager()

        with pytest.raises(RuntimeError):
            async with locks.lock("Order 1"):
                raise RuntimeError("boom")

        assert locks.get_active_locks_count() == 0

    @pytest.mark.asyncio
    async def test_registry_is_emptied_after_sequential_passes(self) -> None:
        locks = SheetTitleLockManager()

        for idx in range(500):
            async with locks.lock(f"Order {idx}"):
                pass

        assert locks.get_active_locks_count() == 0

    @pytest.mark.asyncio
    async def test_lock_is_kept_while_someone_waits(self) -> None:
        """Un titulo con espera pendiente conserva su lock hasta el ultimo usuario."""
        locks = SheetTitleLockManager()
        seen: List[int] = []

        async def worker() -> None:
            async with locks.lock("Order 1"):
                seen.append(locks.get_active_locks_count())
                await asyncio.sleep(0.01)

        await asyncio.gather(worker(), worker(), worker())

        assert seen == [1, 1, 1]
        assert locks.get_active_locks_count() == 0

    @pytest.mark.asyncio
    async def test_timeout_does_not_leak_the_waiter(self) -> None:
        locks = SheetTitleLockManager(timeout=0.05)

        async with locks.lock("Order 1"):
            with pytest.raises(SheetTitleLockTimeoutError):
                async with locks.lock("Order 1"):
                    pass
            assert locks._users["Order 1"] == 1

        assert locks.get_active_locks_count() == 0
