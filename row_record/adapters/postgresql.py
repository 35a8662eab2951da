"""PostgreSQL adapter - sync and async using psycopg (v3+)."""

from __future__ import annotations

from typing import Any

from row_record.adapters.pooling import PooledAsyncAdapter, PooledSyncAdapter
from row_record.core.connection import ConnectionConfig


def _build_conninfo(config: ConnectionConfig) -> str:
    """Build a libpq connection string from config fields."""
    parts: list[str] = []
    if config.host is not None:
        parts.append(f"host={config.host}")
    if config.port is not None:
        parts.append(f"port={config.port}")
    if config.user is not None:
        parts.append(f"user={config.user}")
    if config.password is not None:
        parts.append(f"password={config.password}")
    parts.append(f"dbname={config.database}")
    return " ".join(parts)


class PostgresqlSyncAdapter(PooledSyncAdapter):
    """Synchronous PostgreSQL adapter using psycopg (v3+)."""

    _paramstyle = "pyformat"

    def connect(self, config: ConnectionConfig) -> Any:
        import psycopg

        return psycopg.connect(_build_conninfo(config), **config.extra)


class PostgresqlAsyncAdapter(PooledAsyncAdapter):
    """Asynchronous PostgreSQL adapter using psycopg (v3+)."""

    _paramstyle = "pyformat"

    async def connect_async(self, config: ConnectionConfig) -> Any:
        import psycopg

        return await psycopg.AsyncConnection.connect(_build_conninfo(config), **config.extra)

    async def execute_async(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        cursor = connection.cursor()
        await cursor.execute(sql, params or None)
        return cursor
