"""RowRecord - row-to-record mapping with change tracking and statement generation."""

from __future__ import annotations

from row_record.core.connection import (
    AsyncConnectionManager,
    ConnectionConfig,
    ConnectionManager,
)
from row_record.core.database import AsyncDatabase, Database
from row_record.core.enums import DatabaseBackend, ErrorKind, RecordState, StatementKind
from row_record.core.exceptions import (
    AdapterError,
    ExecutionError,
    FieldMappingError,
    MappingError,
    MissingPrimaryKeyError,
    MultipleRowsError,
    PoolError,
    RecordStateError,
    RowRecordError,
    SchemaError,
    StatementError,
    StatementExecutionError,
    UnresolvedColumnError,
    UnsupportedLiteralError,
)
from row_record.core.executor import (
    AsyncCommandExecutor,
    AsyncConnectionExecutor,
    CommandExecutor,
    ConnectionExecutor,
)
from row_record.core.naming import pascal_to_snake, snake_to_pascal
from row_record.core.results import ResultSet
from row_record.mapping import (
    DATE_SENTINEL,
    DATETIME_SENTINEL,
    Record,
    RecordDescriptor,
    RowMapper,
    key,
    resolve,
)
from row_record.statements import (
    ANSI,
    ORACLE,
    Dialect,
    Statement,
    StatementGenerator,
    encode_literal,
)

__all__ = [
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    "AsyncConnectionManager",
    # Database
    "Database",
    "AsyncDatabase",
    "CommandExecutor",
    "AsyncCommandExecutor",
    "ConnectionExecutor",
    "AsyncConnectionExecutor",
    "ResultSet",
    # Records
    "Record",
    "RecordDescriptor",
    "RowMapper",
    "key",
    "resolve",
    "DATETIME_SENTINEL",
    "DATE_SENTINEL",
    "pascal_to_snake",
    "snake_to_pascal",
    # Statements
    "Statement",
    "StatementGenerator",
    "Dialect",
    "ANSI",
    "ORACLE",
    "encode_literal",
    # Enums
    "DatabaseBackend",
    "ErrorKind",
    "RecordState",
    "StatementKind",
    # Exceptions
    "RowRecordError",
    "SchemaError",
    "MappingError",
    "UnresolvedColumnError",
    "FieldMappingError",
    "StatementError",
    "MissingPrimaryKeyError",
    "UnsupportedLiteralError",
    "RecordStateError",
    "ExecutionError",
    "StatementExecutionError",
    "MultipleRowsError",
    "AdapterError",
    "PoolError",
]
