"""MySQL adapter - sync (mysql-connector-python) and async (aiomysql)."""

from __future__ import annotations

from typing import Any

from row_record.adapters.pooling import PooledAsyncAdapter, PooledSyncAdapter
from row_record.core.connection import ConnectionConfig


class MysqlSyncAdapter(PooledSyncAdapter):
    """Synchronous MySQL adapter using mysql-connector-python."""

    _paramstyle = "pyformat"

    def connect(self, config: ConnectionConfig) -> Any:
        import mysql.connector

        return mysql.connector.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            **config.extra,
        )


class MysqlAsyncAdapter(PooledAsyncAdapter):
    """Asynchronous MySQL adapter using aiomysql."""

    _paramstyle = "pyformat"

    async def connect_async(self, config: ConnectionConfig) -> Any:
        import aiomysql

        return await aiomysql.connect(
            host=config.host,
            port=config.port or 3306,
            user=config.user,
            password=config.password or "",
            db=config.database,
            **config.extra,
        )

    async def _close_async(self, connection: Any) -> None:
        # aiomysql closes synchronously
        connection.close()

    async def execute_async(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        cursor = await connection.cursor()
        await cursor.execute(sql, params or None)
        return cursor
