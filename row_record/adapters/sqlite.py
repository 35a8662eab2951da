"""SQLite adapter - sync (sqlite3 stdlib) and async (aiosqlite)."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from row_record.adapters.pooling import PooledAsyncAdapter, PooledSyncAdapter
from row_record.core.connection import ConnectionConfig


def _bindable(params: dict[str, Any] | None) -> dict[str, Any]:
    """sqlite3 binds neither Decimal nor date/time natively; send them as text."""
    if not params:
        return {}
    converted: dict[str, Any] = {}
    for name, value in params.items():
        if isinstance(value, Decimal):
            value = str(value)
        elif isinstance(value, datetime):
            value = value.isoformat(sep=" ")
        elif isinstance(value, date):
            value = value.isoformat()
        converted[name] = value
    return converted


class SqliteSyncAdapter(PooledSyncAdapter):
    """Synchronous SQLite adapter using stdlib sqlite3."""

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        conn = sqlite3.connect(config.database, check_same_thread=False)
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> sqlite3.Cursor:
        return connection.execute(sql, _bindable(params))


class SqliteAsyncAdapter(PooledAsyncAdapter):
    """Asynchronous SQLite adapter using aiosqlite."""

    async def connect_async(self, config: ConnectionConfig) -> Any:
        import aiosqlite

        conn = await aiosqlite.connect(config.database)
        await conn.execute("PRAGMA journal_mode=WAL")
        return conn

    async def execute_async(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await connection.execute(sql, _bindable(params))
