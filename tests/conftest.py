"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from row_record.core.connection import ConnectionConfig
from row_record.core.results import ResultSet
from row_record.statements.dialect import ANSI, Dialect


class FakeExecutor:
    """In-memory CommandExecutor recording every statement it is given."""

    def __init__(self, dialect: Dialect = ANSI) -> None:
        self.dialect = dialect
        self.queries: list[tuple[str, dict[str, Any] | None]] = []
        self.statements: list[tuple[str, dict[str, Any] | None]] = []
        self.result = ResultSet(())
        self.rowcount = 1

    def execute_reader(self, sql: str, params: dict[str, Any] | None = None) -> ResultSet:
        self.queries.append((sql, params))
        return self.result

    def execute_non_query(self, sql: str, params: dict[str, Any] | None = None) -> int:
        self.statements.append((sql, params))
        return self.rowcount


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config with a single pooled connection."""
    return ConnectionConfig(driver="sqlite", database=":memory:", pool_size=1)


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


class AsyncFakeExecutor(FakeExecutor):
    """Awaitable variant of FakeExecutor."""

    async def execute_reader(  # type: ignore[override]
        self, sql: str, params: dict[str, Any] | None = None
    ) -> ResultSet:
        return FakeExecutor.execute_reader(self, sql, params)

    async def execute_non_query(  # type: ignore[override]
        self, sql: str, params: dict[str, Any] | None = None
    ) -> int:
        return FakeExecutor.execute_non_query(self, sql, params)


@pytest.fixture
def async_fake_executor() -> AsyncFakeExecutor:
    return AsyncFakeExecutor()
