"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from row_record.core.enums import ErrorKind
from row_record.core.exceptions import (
    AdapterError,
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


@pytest.mark.parametrize(
    ("error", "base", "kind"),
    [
        (SchemaError("x"), RowRecordError, ErrorKind.SCHEMA),
        (UnresolvedColumnError("T", ["c"]), MappingError, ErrorKind.UNRESOLVED_COLUMN),
        (FieldMappingError("c", "int", "v"), MappingError, ErrorKind.FIELD_MAPPING),
        (MissingPrimaryKeyError("T", "delete"), StatementError, ErrorKind.MISSING_PRIMARY_KEY),
        (UnsupportedLiteralError(b"x"), StatementError, ErrorKind.UNSUPPORTED_LITERAL),
        (RecordStateError("loaded", "mark persisted"), RowRecordError, ErrorKind.RECORD_STATE),
        (StatementExecutionError("select 1", "boom"), RowRecordError, ErrorKind.STATEMENT_EXECUTION),
        (MultipleRowsError("T", 2), RowRecordError, ErrorKind.MULTIPLE_ROWS),
        (PoolError("empty"), AdapterError, ErrorKind.ADAPTER),
    ],
)
def test_hierarchy_and_kind(error: RowRecordError, base: type, kind: ErrorKind) -> None:
    assert isinstance(error, base)
    assert error.kind is kind


class TestMessages:
    def test_statement_appended(self) -> None:
        err = StatementExecutionError("update t set a = '1' where id = '2'", "no such table: t")
        assert str(err) == "no such table: t\nupdate t set a = '1' where id = '2'"
        assert err.statement.startswith("update t")

    def test_field_mapping_message(self) -> None:
        err = FieldMappingError("amount", "Decimal", b"\x00", "not a numeric value")
        assert str(err) == (
            "Cannot map column 'amount' (bytes value b'\\x00') to type Decimal: "
            "not a numeric value"
        )

    def test_missing_primary_key_message(self) -> None:
        err = MissingPrimaryKeyError("AuditEntry", "update")
        assert "AuditEntry" in str(err)
        assert "update" in str(err)
