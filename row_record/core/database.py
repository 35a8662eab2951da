"""Record-level database entry points.

``Database`` queries rows into records and persists records back through an
explicit executor handle. It holds no global state: tests pass a fake
executor, applications build one from a ``ConnectionConfig``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from row_record.core.connection import (
    AsyncConnectionManager,
    ConnectionConfig,
    ConnectionManager,
)
from row_record.core.exceptions import MultipleRowsError
from row_record.core.executor import (
    AsyncCommandExecutor,
    AsyncConnectionExecutor,
    CommandExecutor,
    ConnectionExecutor,
)
from row_record.core.results import ResultSet
from row_record.mapping.record import Record
from row_record.mapping.row import RowMapper
from row_record.mapping.schema import RecordDescriptor, resolve
from row_record.statements.generator import Statement, StatementGenerator

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def default_query(descriptor: RecordDescriptor) -> str:
    """``select *`` over the record type's table."""
    return f"select * from {descriptor.table_name}"


def _map_result(descriptor: RecordDescriptor, result: ResultSet, strict: bool) -> list[Any]:
    # A fresh mapper per execution keeps column bindings from leaking
    # between differently shaped result sets.
    mapper: RowMapper[Any] = RowMapper(descriptor, strict=strict)
    return mapper.map_rows(result.columns, result.rows)


class Database:
    """Synchronous record database.

    Args:
        executor: Data-access handle running the generated statements.
        parameterized: Generate bound-parameter statements instead of literals.
        strict: Raise on query columns that have no matching record field.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        *,
        parameterized: bool = False,
        strict: bool = False,
    ) -> None:
        self._executor = executor
        self._strict = strict
        self.generator = StatementGenerator(executor.dialect, parameterized=parameterized)

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> Database:
        """Create a Database backed by a pooled connection for *config*."""
        executor = ConnectionExecutor(ConnectionManager(config))
        return cls(
            executor,
            parameterized=config.parameterized,
            strict=config.strict_columns,
        )

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    def query(
        self,
        record_type: type[R],
        sql: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[R]:
        """Run *sql* (default: select all rows of the table) and map every row."""
        descriptor = resolve(record_type)
        result = self._executor.execute_reader(sql or default_query(descriptor), params)
        return _map_result(descriptor, result, self._strict)

    def query_one(
        self,
        record_type: type[R],
        sql: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> R | None:
        """Map a single row.

        Returns None if zero rows match.
        Raises MultipleRowsError if more than one row matches.
        """
        records = self.query(record_type, sql, params)
        if len(records) > 1:
            raise MultipleRowsError(record_type.__name__, len(records))
        return records[0] if records else None

    def save(self, record: Record) -> int:
        """Update a loaded record, insert a new one. Returns affected rows."""
        if record.loaded:
            return self.update(record)
        return self.insert(record)

    def insert(self, record: Record) -> int:
        return self._run(self.generator.generate_insert(record))

    def update(self, record: Record) -> int:
        """Write the fields changed since load.

        An update with no changed fields is not sent to the database.
        """
        statement = self.generator.generate_update(record)
        if statement.is_empty:
            logger.info(
                "No changed fields on %s; skipping update", type(record).__name__
            )
            return 0
        return self._run(statement)

    def delete(self, record: Record) -> int:
        """Delete a loaded record. Records never loaded affect no rows."""
        if not record.loaded:
            return 0
        return self._run(self.generator.generate_delete(record))

    def _run(self, statement: Statement) -> int:
        logger.debug("Generated %s: %s", statement.kind.value, statement.sql)
        return self._executor.execute_non_query(statement.sql, statement.params)

    def close(self) -> None:
        close = getattr(self._executor, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncDatabase:
    """Asynchronous record database.

    Mapping and statement generation are synchronous; only execution awaits.
    """

    def __init__(
        self,
        executor: AsyncCommandExecutor,
        *,
        parameterized: bool = False,
        strict: bool = False,
    ) -> None:
        self._executor = executor
        self._strict = strict
        self.generator = StatementGenerator(executor.dialect, parameterized=parameterized)

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> AsyncDatabase:
        """Create an AsyncDatabase backed by a pooled connection for *config*."""
        executor = AsyncConnectionExecutor(AsyncConnectionManager(config))
        return cls(
            executor,
            parameterized=config.parameterized,
            strict=config.strict_columns,
        )

    @property
    def executor(self) -> AsyncCommandExecutor:
        return self._executor

    async def query(
        self,
        record_type: type[R],
        sql: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[R]:
        descriptor = resolve(record_type)
        result = await self._executor.execute_reader(sql or default_query(descriptor), params)
        return _map_result(descriptor, result, self._strict)

    async def query_one(
        self,
        record_type: type[R],
        sql: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> R | None:
        records = await self.query(record_type, sql, params)
        if len(records) > 1:
            raise MultipleRowsError(record_type.__name__, len(records))
        return records[0] if records else None

    async def save(self, record: Record) -> int:
        if record.loaded:
            return await self.update(record)
        return await self.insert(record)

    async def insert(self, record: Record) -> int:
        return await self._run(self.generator.generate_insert(record))

    async def update(self, record: Record) -> int:
        statement = self.generator.generate_update(record)
        if statement.is_empty:
            logger.info(
                "No changed fields on %s; skipping update", type(record).__name__
            )
            return 0
        return await self._run(statement)

    async def delete(self, record: Record) -> int:
        if not record.loaded:
            return 0
        return await self._run(self.generator.generate_delete(record))

    async def _run(self, statement: Statement) -> int:
        logger.debug("Generated %s: %s", statement.kind.value, statement.sql)
        return await self._executor.execute_non_query(statement.sql, statement.params)

    async def close(self) -> None:
        close = getattr(self._executor, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> AsyncDatabase:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
