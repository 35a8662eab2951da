"""Adapter contracts consumed by the connection managers and executors.

An adapter wraps one driver: it opens the pool, lends connections and runs a
statement, returning the driver's cursor. It also tells the executor how
placeholders are written (``paramstyle``) and the statement generator how
date/time literals look (``dialect``).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from row_record.core.connection import ConnectionConfig
from row_record.statements.dialect import Dialect


@runtime_checkable
class BackendTraits(Protocol):
    @property
    def paramstyle(self) -> str:
        """'named' for ``:name`` or 'pyformat' for ``%(name)s``."""
        ...

    @property
    def dialect(self) -> Dialect: ...


@runtime_checkable
class SyncAdapter(BackendTraits, Protocol):
    """Blocking driver adapter."""

    def create_pool(self, config: ConnectionConfig) -> Any: ...

    def acquire_connection(self, pool: Any) -> Any:
        """Take a connection out of *pool*; raises PoolError when none is free."""
        ...

    def release_connection(self, connection: Any, pool: Any) -> None: ...

    def close_pool(self, pool: Any) -> None: ...

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Run *sql*; the returned DB-API cursor yields tuple rows."""
        ...


@runtime_checkable
class AsyncAdapter(BackendTraits, Protocol):
    """Awaitable driver adapter; same contract as ``SyncAdapter``."""

    async def create_pool_async(self, config: ConnectionConfig) -> Any: ...

    async def acquire_connection_async(self, pool: Any) -> Any: ...

    async def release_connection_async(self, connection: Any, pool: Any) -> None: ...

    async def close_pool_async(self, pool: Any) -> None: ...

    async def execute_async(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any: ...
