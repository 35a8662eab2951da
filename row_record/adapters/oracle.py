"""Oracle adapter - sync and async using oracledb.

Oracle takes date/time literals through ``to_date`` (see ``ORACLE`` dialect).
"""

from __future__ import annotations

from typing import Any

from row_record.adapters.pooling import PooledAsyncAdapter, PooledSyncAdapter
from row_record.core.connection import ConnectionConfig
from row_record.statements.dialect import ORACLE


def _build_dsn(config: ConnectionConfig) -> str:
    """Build an Oracle DSN string from config fields (host:port/database)."""
    if config.host is None:
        return config.database
    return f"{config.host}:{config.port or 1521}/{config.database}"


class OracleSyncAdapter(PooledSyncAdapter):
    """Synchronous Oracle adapter using oracledb."""

    _dialect = ORACLE

    def connect(self, config: ConnectionConfig) -> Any:
        import oracledb

        return oracledb.connect(
            user=config.user, password=config.password, dsn=_build_dsn(config), **config.extra
        )


class OracleAsyncAdapter(PooledAsyncAdapter):
    """Asynchronous Oracle adapter using oracledb async support."""

    _dialect = ORACLE

    async def connect_async(self, config: ConnectionConfig) -> Any:
        import oracledb

        return await oracledb.connect_async(
            user=config.user, password=config.password, dsn=_build_dsn(config), **config.extra
        )

    async def execute_async(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        cursor = connection.cursor()
        await cursor.execute(sql, params or {})
        return cursor
