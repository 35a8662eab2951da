"""Enumerations shared across the package."""

from __future__ import annotations

from enum import Enum


class DatabaseBackend(Enum):
    """Supported database backends."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    ORACLE = "oracle"


class RecordState(Enum):
    """Lifecycle of a record instance."""

    NEW = "new"
    LOADED = "loaded"
    PERSISTED = "persisted"


class StatementKind(Enum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class ErrorKind(Enum):
    """Error taxonomy tag carried by every RowRecord exception."""

    SCHEMA = "schema"
    UNRESOLVED_COLUMN = "unresolved_column"
    FIELD_MAPPING = "field_mapping"
    MISSING_PRIMARY_KEY = "missing_primary_key"
    RECORD_STATE = "record_state"
    STATEMENT_EXECUTION = "statement_execution"
    UNSUPPORTED_LITERAL = "unsupported_literal"
    MULTIPLE_ROWS = "multiple_rows"
    ADAPTER = "adapter"
