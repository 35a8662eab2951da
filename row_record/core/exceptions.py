"""RowRecord exception hierarchy.

Every exception carries an ``ErrorKind`` tag so callers can branch on the
failure category without matching class names. Raw driver exceptions are
never exposed directly; they are chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Any

from row_record.core.enums import ErrorKind


class RowRecordError(Exception):
    """Base exception for all RowRecord errors."""

    kind: ErrorKind


# --- Schema ---


class SchemaError(RowRecordError):
    """Raised when a record type cannot be described."""

    kind = ErrorKind.SCHEMA


# --- Mapping ---


class MappingError(RowRecordError):
    """Base for row mapping errors."""


class UnresolvedColumnError(MappingError):
    """Raised in strict mode when a projected column has no matching field."""

    kind = ErrorKind.UNRESOLVED_COLUMN

    def __init__(self, record_type: str, columns: list[str]) -> None:
        self.record_type = record_type
        self.columns = columns
        super().__init__(f"Columns {columns} have no matching field on {record_type}")


class FieldMappingError(MappingError):
    """Raised when a column value cannot be coerced to its field's type."""

    kind = ErrorKind.FIELD_MAPPING

    def __init__(self, column: str, target: str, value: Any, detail: str = "") -> None:
        self.column = column
        self.target = target
        self.value = value
        message = (
            f"Cannot map column '{column}' ({type(value).__name__} value {value!r}) "
            f"to type {target}"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


# --- Statement generation ---


class StatementError(RowRecordError):
    """Base for statement generation errors."""


class MissingPrimaryKeyError(StatementError):
    """Raised when update/delete is requested for a type without primary keys."""

    kind = ErrorKind.MISSING_PRIMARY_KEY

    def __init__(self, record_type: str, operation: str) -> None:
        self.record_type = record_type
        self.operation = operation
        super().__init__(
            f"Cannot generate {operation} for {record_type}: no primary key field declared"
        )


class UnsupportedLiteralError(StatementError):
    """Raised when a value has no inline SQL literal form (e.g. binary data).

    Such values can only be written through parameterized statements.
    """

    kind = ErrorKind.UNSUPPORTED_LITERAL

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"{type(value).__name__} values cannot be written as SQL literals; "
            "use parameterized statements"
        )


class RecordStateError(RowRecordError):
    """Raised on invalid record lifecycle transitions."""

    kind = ErrorKind.RECORD_STATE

    def __init__(self, current_state: str, attempted_action: str) -> None:
        self.current_state = current_state
        self.attempted_action = attempted_action
        super().__init__(f"Cannot {attempted_action} record in state '{current_state}'")


# --- Execution ---


class ExecutionError(RowRecordError):
    """Base for statement execution errors."""


class StatementExecutionError(ExecutionError):
    """Raised when the driver reports a failure executing a statement.

    The statement text is kept on the exception and appended to the message.
    """

    kind = ErrorKind.STATEMENT_EXECUTION

    def __init__(self, statement: str, detail: str) -> None:
        self.statement = statement
        self.detail = detail
        super().__init__(f"{detail}\n{statement}")


class MultipleRowsError(ExecutionError):
    """Raised when query_one encounters more than one row."""

    kind = ErrorKind.MULTIPLE_ROWS

    def __init__(self, record_type: str, row_count: int) -> None:
        self.record_type = record_type
        self.row_count = row_count
        super().__init__(
            f"query_one for {record_type} returned {row_count} rows (expected 0 or 1)"
        )


# --- Adapter ---


class AdapterError(RowRecordError):
    """Base for adapter errors."""

    kind = ErrorKind.ADAPTER


class PoolError(AdapterError):
    """Raised on connection pool failures."""
