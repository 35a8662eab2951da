"""INSERT / UPDATE / DELETE generation from record state.

Inserts list every field. Updates list only the fields whose current value
differs from the load-time snapshot, and end with a WHERE clause built from
the primary-key fields. Deletes use the same WHERE clause.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from row_record.core.enums import StatementKind
from row_record.core.exceptions import MissingPrimaryKeyError
from row_record.mapping.record import Record
from row_record.mapping.schema import FieldSpec, RecordDescriptor, resolve
from row_record.mapping.types import is_sentinel
from row_record.statements.dialect import ANSI, Dialect
from row_record.statements.literals import bind_value, encode_literal

_MISSING = object()

# Prefix of WHERE-clause parameter names. Repeated until the name is not
# also a column of the record, so SET and WHERE parameters never share a name.
_KEY_PARAM_PREFIX = "key_"


@dataclass(frozen=True)
class Statement:
    """A generated SQL statement.

    ``params`` is ``None`` for literal-mode statements. ``columns`` lists the
    columns written by an INSERT or UPDATE.
    """

    kind: StatementKind
    table: str
    sql: str
    params: dict[str, Any] | None = None
    columns: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True for an UPDATE without a SET clause."""
        return self.kind is StatementKind.UPDATE and not self.columns

    def __str__(self) -> str:
        return self.sql


class StatementGenerator:
    """Generates statements for records.

    Args:
        dialect: Date/time literal format of the target database.
        parameterized: Emit ``:name`` placeholders and a params dict instead
            of inline literals.
    """

    def __init__(self, dialect: Dialect = ANSI, *, parameterized: bool = False) -> None:
        self.dialect = dialect
        self.parameterized = parameterized

    def generate_insert(self, record: Record) -> Statement:
        descriptor = resolve(type(record))
        params: dict[str, Any] = {}
        values = [
            self._value(spec.column, getattr(record, spec.name), params)
            for spec in descriptor.fields
        ]
        columns = tuple(descriptor.columns)
        sql = (
            f"insert into {descriptor.table_name} ({', '.join(columns)}) "
            f"values ({', '.join(values)})"
        )
        return self._statement(StatementKind.INSERT, descriptor, sql, params, columns)

    def generate_update(self, record: Record) -> Statement:
        descriptor = resolve(type(record))
        self._require_primary_key(descriptor, "update")

        params: dict[str, Any] = {}
        assignments: list[str] = []
        changed: list[str] = []
        for spec in self.changed_fields(record):
            value = self._value(spec.column, getattr(record, spec.name), params)
            assignments.append(f"{spec.column} = {value}")
            changed.append(spec.column)

        parts = [f"update {descriptor.table_name}"]
        if assignments:
            parts.append("set " + ", ".join(assignments))
        parts.append(self._where(descriptor, record, params))
        return self._statement(
            StatementKind.UPDATE, descriptor, " ".join(parts), params, tuple(changed)
        )

    def generate_delete(self, record: Record) -> Statement:
        descriptor = resolve(type(record))
        self._require_primary_key(descriptor, "delete")

        params: dict[str, Any] = {}
        sql = f"delete from {descriptor.table_name} {self._where(descriptor, record, params)}"
        return self._statement(StatementKind.DELETE, descriptor, sql, params, ())

    def changed_fields(self, record: Record) -> list[FieldSpec]:
        """Fields whose current value differs from the load-time snapshot."""
        descriptor = resolve(type(record))
        snapshot = record.snapshot
        changed: list[FieldSpec] = []
        for spec in descriptor.fields:
            initial = snapshot.get(spec.column, _MISSING)
            value = getattr(record, spec.name)
            if initial is _MISSING:
                # A column loaded as NULL keeps its zero value until assigned.
                if value is None or value == spec.zero:
                    continue
                if spec.is_temporal and is_sentinel(value):
                    continue
            elif value == initial:
                continue
            changed.append(spec)
        return changed

    def _require_primary_key(self, descriptor: RecordDescriptor, operation: str) -> None:
        if not descriptor.primary_keys:
            raise MissingPrimaryKeyError(descriptor.record_type.__name__, operation)

    def _where(self, descriptor: RecordDescriptor, record: Record, params: dict[str, Any]) -> str:
        columns = set(descriptor.columns)
        clauses = []
        for i, spec in enumerate(descriptor.primary_keys):
            keyword = "where" if i == 0 else "and"
            value = self._value(
                _key_param_name(spec.column, columns), getattr(record, spec.name), params
            )
            clauses.append(f"{keyword} {spec.column} = {value}")
        return " ".join(clauses)

    def _value(self, name: str, value: Any, params: dict[str, Any]) -> str:
        if not self.parameterized:
            return encode_literal(value, self.dialect)
        params[name] = bind_value(value)
        return f":{name}"

    def _statement(
        self,
        kind: StatementKind,
        descriptor: RecordDescriptor,
        sql: str,
        params: dict[str, Any],
        columns: tuple[str, ...],
    ) -> Statement:
        return Statement(
            kind=kind,
            table=descriptor.table_name,
            sql=sql,
            params=params if self.parameterized else None,
            columns=columns,
        )


def _key_param_name(column: str, columns: set[str]) -> str:
    name = _KEY_PARAM_PREFIX + column
    while name in columns:
        name = _KEY_PARAM_PREFIX + name
    return name
