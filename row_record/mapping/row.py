"""Row-to-record mapper.

One ``RowMapper`` is created per query execution. The first row builds the
column binding (column position -> field or reserved slot); every later row
of the same execution reuses it without resolving names again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from row_record.core.exceptions import FieldMappingError, UnresolvedColumnError
from row_record.core.naming import snake_to_pascal
from row_record.mapping.record import Record
from row_record.mapping.schema import FieldSpec, RecordDescriptor
from row_record.mapping.types import coerce, type_name

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)

# Column names diverted to the record's numeric metadata slots.
RESERVED_COLUMNS = frozenset({"count", "max"})


@dataclass(frozen=True)
class ColumnSlot:
    """Resolution of one returned column."""

    column: str
    field: FieldSpec | None = None
    reserved: str | None = None

    @property
    def resolved(self) -> bool:
        return self.field is not None or self.reserved is not None


class ColumnBinding:
    """Column-to-field resolution for one result shape.

    Assumes every row of one result set has the same columns in the same order.
    """

    def __init__(self, descriptor: RecordDescriptor, columns: Sequence[str]) -> None:
        self.descriptor = descriptor
        self.slots: tuple[ColumnSlot, ...] = tuple(
            self._resolve(column.lower()) for column in columns
        )

    def _resolve(self, column: str) -> ColumnSlot:
        name = snake_to_pascal(column)
        spec = self.descriptor.field(name)
        if column in RESERVED_COLUMNS and spec is None:
            return ColumnSlot(column, reserved=column)
        if spec is None:
            spec = self.descriptor.field_for_column(column)
        return ColumnSlot(column, field=spec)

    @property
    def unresolved(self) -> list[str]:
        return [slot.column for slot in self.slots if not slot.resolved]


class RowMapper(Generic[T]):
    """Maps result rows onto new instances of one record type.

    Args:
        descriptor: Resolved descriptor of the target record type.
        strict: Raise ``UnresolvedColumnError`` for columns with no matching
            field instead of logging and skipping them.
    """

    def __init__(self, descriptor: RecordDescriptor, *, strict: bool = False) -> None:
        self._descriptor = descriptor
        self._strict = strict
        self._binding: ColumnBinding | None = None

    @property
    def binding(self) -> ColumnBinding | None:
        return self._binding

    def _bind(self, columns: Sequence[str]) -> ColumnBinding:
        binding = ColumnBinding(self._descriptor, columns)
        unresolved = binding.unresolved
        if unresolved:
            record_name = self._descriptor.record_type.__name__
            if self._strict:
                raise UnresolvedColumnError(record_name, unresolved)
            logger.info(
                "Query returned column(s) %s not present in %s; skipping",
                ", ".join(unresolved),
                record_name,
            )
        return binding

    def map_row(self, columns: Sequence[str], values: Sequence[Any]) -> T:
        """Map one row to a new, loaded record."""
        if self._binding is None:
            self._binding = self._bind(columns)

        record = self._descriptor.new_record()
        snapshot: dict[str, Any] = {}

        for slot, value in zip(self._binding.slots, values, strict=True):
            if value is None:
                continue

            if slot.reserved is not None:
                object.__setattr__(record, slot.reserved, _coerce_reserved(slot.column, value))
                continue

            spec = slot.field
            if spec is None:
                continue

            try:
                converted = coerce(value, spec.type)
            except (TypeError, ValueError, ArithmeticError) as e:
                raise FieldMappingError(slot.column, type_name(spec.type), value, str(e)) from e

            object.__setattr__(record, spec.name, converted)
            snapshot[spec.column] = getattr(record, spec.name)

        record._mark_loaded(snapshot)
        return record  # type: ignore[return-value]

    def map_rows(self, columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> list[T]:
        """Map all rows of one result set."""
        return [self.map_row(columns, row) for row in rows]


def _coerce_reserved(column: str, value: Any) -> int:
    try:
        return coerce(value, int)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise FieldMappingError(column, "int", value, str(e)) from e
