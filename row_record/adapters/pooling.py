"""List-backed connection pools shared by the concrete adapters.

Subclasses provide ``connect`` / ``connect_async`` and ``execute`` /
``execute_async``; the pool is a plain list of open connections.
"""

from __future__ import annotations

from typing import Any

from row_record.core.connection import ConnectionConfig
from row_record.core.exceptions import PoolError
from row_record.statements.dialect import ANSI, Dialect


class _AdapterTraits:
    _paramstyle = "named"
    _dialect: Dialect = ANSI

    @property
    def paramstyle(self) -> str:
        return self._paramstyle

    @property
    def dialect(self) -> Dialect:
        return self._dialect


class PooledSyncAdapter(_AdapterTraits):
    """Base for synchronous adapters."""

    def connect(self, config: ConnectionConfig) -> Any:
        raise NotImplementedError

    def create_pool(self, config: ConnectionConfig) -> list[Any]:
        return [self.connect(config) for _ in range(config.pool_size)]

    def acquire_connection(self, pool: list[Any]) -> Any:
        if not pool:
            raise PoolError("No connections available in pool")
        return pool.pop()

    def release_connection(self, connection: Any, pool: list[Any]) -> None:
        pool.append(connection)

    def close_pool(self, pool: list[Any]) -> None:
        for conn in pool:
            conn.close()
        pool.clear()

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        cursor = connection.cursor()
        if params:
            cursor.execute(sql, params)
        else:
            cursor.execute(sql)
        return cursor


class PooledAsyncAdapter(_AdapterTraits):
    """Base for asynchronous adapters."""

    async def connect_async(self, config: ConnectionConfig) -> Any:
        raise NotImplementedError

    async def create_pool_async(self, config: ConnectionConfig) -> list[Any]:
        return [await self.connect_async(config) for _ in range(config.pool_size)]

    async def acquire_connection_async(self, pool: list[Any]) -> Any:
        if not pool:
            raise PoolError("No connections available in pool")
        return pool.pop()

    async def release_connection_async(self, connection: Any, pool: list[Any]) -> None:
        pool.append(connection)

    async def close_pool_async(self, pool: list[Any]) -> None:
        for conn in pool:
            await self._close_async(conn)
        pool.clear()

    async def _close_async(self, connection: Any) -> None:
        await connection.close()

    async def execute_async(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        raise NotImplementedError
