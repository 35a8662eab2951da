"""Command executors: the data-access contract used by ``Database``.

An executor runs a query and returns a ``ResultSet``, or runs a non-query
statement and returns the affected-row count. Driver failures are wrapped in
``StatementExecutionError`` with the statement text attached; nothing is
retried.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from row_record.core.connection import AsyncConnectionManager, ConnectionManager
from row_record.core.exceptions import StatementExecutionError
from row_record.core.params import normalize_params
from row_record.core.results import ResultSet
from row_record.statements.dialect import Dialect

logger = logging.getLogger(__name__)


@runtime_checkable
class CommandExecutor(Protocol):
    """Synchronous data-access contract."""

    @property
    def dialect(self) -> Dialect: ...

    def execute_reader(self, sql: str, params: dict[str, Any] | None = None) -> ResultSet: ...

    def execute_non_query(self, sql: str, params: dict[str, Any] | None = None) -> int: ...


@runtime_checkable
class AsyncCommandExecutor(Protocol):
    """Asynchronous data-access contract."""

    @property
    def dialect(self) -> Dialect: ...

    async def execute_reader(
        self, sql: str, params: dict[str, Any] | None = None
    ) -> ResultSet: ...

    async def execute_non_query(self, sql: str, params: dict[str, Any] | None = None) -> int: ...


class ConnectionExecutor:
    """CommandExecutor over a ConnectionManager. Each non-query is committed."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connection_manager = connection_manager
        self._adapter = connection_manager.adapter

    @property
    def dialect(self) -> Dialect:
        return self._adapter.dialect

    @property
    def connection_manager(self) -> ConnectionManager:
        return self._connection_manager

    def _prepare(self, sql: str, params: dict[str, Any] | None) -> str:
        if params:
            return normalize_params(sql, self._adapter.paramstyle)
        return sql

    def execute_reader(self, sql: str, params: dict[str, Any] | None = None) -> ResultSet:
        prepared = self._prepare(sql, params)
        logger.debug("Executing query: %s", prepared)
        with self._connection_manager.get_connection() as conn:
            try:
                cursor = self._adapter.execute(conn, prepared, params)
                return ResultSet.from_cursor(cursor)
            except Exception as e:
                raise StatementExecutionError(sql, str(e)) from e

    def execute_non_query(self, sql: str, params: dict[str, Any] | None = None) -> int:
        prepared = self._prepare(sql, params)
        logger.debug("Executing statement: %s", prepared)
        with self._connection_manager.get_connection() as conn:
            try:
                cursor = self._adapter.execute(conn, prepared, params)
                conn.commit()
            except Exception as e:
                raise StatementExecutionError(sql, str(e)) from e
            return int(cursor.rowcount)

    def close(self) -> None:
        self._connection_manager.close_pool()


class AsyncConnectionExecutor:
    """AsyncCommandExecutor over an AsyncConnectionManager."""

    def __init__(self, connection_manager: AsyncConnectionManager) -> None:
        self._connection_manager = connection_manager
        self._adapter = connection_manager.adapter

    @property
    def dialect(self) -> Dialect:
        return self._adapter.dialect

    @property
    def connection_manager(self) -> AsyncConnectionManager:
        return self._connection_manager

    def _prepare(self, sql: str, params: dict[str, Any] | None) -> str:
        if params:
            return normalize_params(sql, self._adapter.paramstyle)
        return sql

    async def execute_reader(self, sql: str, params: dict[str, Any] | None = None) -> ResultSet:
        prepared = self._prepare(sql, params)
        logger.debug("Executing query: %s", prepared)
        async with self._connection_manager.get_connection() as conn:
            try:
                cursor = await self._adapter.execute_async(conn, prepared, params)
                return await ResultSet.from_async_cursor(cursor)
            except Exception as e:
                raise StatementExecutionError(sql, str(e)) from e

    async def execute_non_query(self, sql: str, params: dict[str, Any] | None = None) -> int:
        prepared = self._prepare(sql, params)
        logger.debug("Executing statement: %s", prepared)
        async with self._connection_manager.get_connection() as conn:
            try:
                cursor = await self._adapter.execute_async(conn, prepared, params)
                await conn.commit()
            except Exception as e:
                raise StatementExecutionError(sql, str(e)) from e
            return int(cursor.rowcount)

    async def close(self) -> None:
        await self._connection_manager.close_pool()
