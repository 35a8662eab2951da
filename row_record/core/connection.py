"""Connection settings and pooled connection managers.

``ConnectionConfig`` carries both the driver settings and the two mapping
options (``parameterized``, ``strict_columns``) that ``Database.from_config``
passes on. A connection manager owns one adapter and the pool it creates;
``Database`` closes it on exit.
"""

from __future__ import annotations

import importlib
from contextlib import asynccontextmanager, contextmanager
from typing import Any

from pydantic import BaseModel, Field

from row_record.core.enums import DatabaseBackend
from row_record.core.exceptions import AdapterError


class ConnectionConfig(BaseModel):
    """Database connection and record-mapping settings.

    Attributes:
        driver: Backend name, one of ``DatabaseBackend`` (case-insensitive).
        extra: Keyword arguments passed through to the driver's connect call.
        parameterized: Generate statements with bound parameters instead of
            inline literals.
        strict_columns: Raise when a query returns a column the record type
            does not declare, instead of logging and skipping it.
    """

    driver: str
    database: str
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    pool_size: int = Field(default=5, ge=1)
    pool_timeout: int = 30
    pool_recycle: int = 1800
    extra: dict[str, Any] = {}
    parameterized: bool = False
    strict_columns: bool = False

    @property
    def backend(self) -> DatabaseBackend:
        try:
            return DatabaseBackend(self.driver.lower())
        except ValueError:
            raise AdapterError(f"Unsupported database driver: {self.driver}") from None


def load_adapter(config: ConnectionConfig, *, asynchronous: bool = False) -> Any:
    """Instantiate the adapter for ``config.driver``.

    Adapters live in ``row_record.adapters.<backend>`` as
    ``<Backend>SyncAdapter`` / ``<Backend>AsyncAdapter``; the module (and its
    driver) is only imported here.
    """
    backend = config.backend
    class_name = f"{backend.name.title()}{'Async' if asynchronous else 'Sync'}Adapter"
    try:
        module = importlib.import_module(f"row_record.adapters.{backend.value}")
        return getattr(module, class_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Cannot load {class_name} for '{config.driver}': {e}") from e


class _BaseConnectionManager:
    def __init__(self, config: ConnectionConfig, adapter: Any | None, asynchronous: bool) -> None:
        self.config = config
        self._adapter = adapter if adapter is not None else load_adapter(
            config, asynchronous=asynchronous
        )
        self._pool: Any = None

    @property
    def adapter(self) -> Any:
        return self._adapter


class ConnectionManager(_BaseConnectionManager):
    """Pool owner for a synchronous adapter. The pool is created on first use."""

    def __init__(self, config: ConnectionConfig, adapter: Any | None = None) -> None:
        super().__init__(config, adapter, asynchronous=False)

    def initialize_pool(self) -> Any:
        if self._pool is None:
            self._pool = self._adapter.create_pool(self.config)
        return self._pool

    @contextmanager
    def get_connection(self):  # type: ignore[no-untyped-def]
        """Borrow a pooled connection for the duration of the block."""
        pool = self.initialize_pool()
        connection = self._adapter.acquire_connection(pool)
        try:
            yield connection
        finally:
            self._adapter.release_connection(connection, pool)

    def close_pool(self) -> None:
        if self._pool is not None:
            self._adapter.close_pool(self._pool)
            self._pool = None


class AsyncConnectionManager(_BaseConnectionManager):
    """Pool owner for an asynchronous adapter."""

    def __init__(self, config: ConnectionConfig, adapter: Any | None = None) -> None:
        super().__init__(config, adapter, asynchronous=True)

    async def initialize_pool(self) -> Any:
        if self._pool is None:
            self._pool = await self._adapter.create_pool_async(self.config)
        return self._pool

    @asynccontextmanager
    async def get_connection(self):  # type: ignore[no-untyped-def]
        pool = await self.initialize_pool()
        connection = await self._adapter.acquire_connection_async(pool)
        try:
            yield connection
        finally:
            await self._adapter.release_connection_async(connection, pool)

    async def close_pool(self) -> None:
        if self._pool is not None:
            await self._adapter.close_pool_async(self._pool)
            self._pool = None
