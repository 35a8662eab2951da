"""Schema resolution: record type -> immutable descriptor.

Descriptors are computed once per record type and cached for the lifetime of
the process. Cache population is guarded by a lock; resolution itself is
deterministic, so two threads racing on the same type compute equal values
and the first one stored wins.
"""

from __future__ import annotations

import dataclasses
import threading
import typing
from dataclasses import dataclass
from typing import Any, TypeVar

from row_record.core.exceptions import SchemaError
from row_record.core.naming import pascal_to_snake
from row_record.mapping.record import PRIMARY_KEY, Record
from row_record.mapping.types import is_temporal_type, unwrap_optional, zero_value

R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class FieldSpec:
    """One mapped field of a record type."""

    name: str
    column: str
    type: Any
    nullable: bool
    primary_key: bool
    zero: Any
    has_default: bool
    init: bool = True

    @property
    def is_temporal(self) -> bool:
        return is_temporal_type(self.type)


@dataclass(frozen=True)
class RecordDescriptor:
    """Resolved metadata for a record type."""

    record_type: type[Record]
    table_name: str
    fields: tuple[FieldSpec, ...]
    primary_keys: tuple[FieldSpec, ...]
    _by_name: dict[str, FieldSpec] = dataclasses.field(repr=False, compare=False)
    _by_column: dict[str, FieldSpec] = dataclasses.field(repr=False, compare=False)

    @property
    def columns(self) -> list[str]:
        return [f.column for f in self.fields]

    def field(self, name: str) -> FieldSpec | None:
        """Look up a field by its attribute name."""
        return self._by_name.get(name)

    def field_for_column(self, column: str) -> FieldSpec | None:
        """Look up a field by its (lowercase) column name."""
        return self._by_column.get(column)

    def new_record(self) -> Record:
        """Instantiate an empty record, filling required fields with zero values."""
        record = self.record_type(
            **{f.name: f.zero for f in self.fields if f.init and not f.has_default}
        )
        for f in self.fields:
            if not f.init and not hasattr(record, f.name):
                object.__setattr__(record, f.name, f.zero)
        return record


_cache: dict[type, RecordDescriptor] = {}
_cache_lock = threading.Lock()


def resolve(record_type: type[R]) -> RecordDescriptor:
    """Return the cached descriptor for *record_type*, computing it on first use.

    Raises:
        SchemaError: If the type is not a dataclass ``Record`` or declares a
            primary key that is not one of its fields.
    """
    descriptor = _cache.get(record_type)
    if descriptor is not None:
        return descriptor

    descriptor = _build_descriptor(record_type)
    with _cache_lock:
        return _cache.setdefault(record_type, descriptor)


def clear_cache() -> None:
    """Drop all cached descriptors."""
    with _cache_lock:
        _cache.clear()


def _resolve_annotations(record_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record_type)
    except (NameError, TypeError):
        # Unresolvable forward references fall back to the raw annotation;
        # string annotations that cannot be evaluated become pass-through.
        return {
            f.name: (Any if isinstance(f.type, str) else f.type)
            for f in dataclasses.fields(record_type)
        }


def _build_descriptor(record_type: type) -> RecordDescriptor:
    if not (isinstance(record_type, type) and issubclass(record_type, Record)):
        raise SchemaError(f"{record_type!r} is not a Record subclass")
    if not dataclasses.is_dataclass(record_type):
        raise SchemaError(f"{record_type.__name__} must be decorated with @dataclass")

    hints = _resolve_annotations(record_type)
    declared_keys = set(record_type.__primary_key__)

    fields: list[FieldSpec] = []
    for dc_field in dataclasses.fields(record_type):
        semantic, nullable = unwrap_optional(hints.get(dc_field.name, Any))
        has_default = (
            dc_field.default is not dataclasses.MISSING
            or dc_field.default_factory is not dataclasses.MISSING
        )
        fields.append(
            FieldSpec(
                name=dc_field.name,
                column=pascal_to_snake(dc_field.name),
                type=semantic,
                nullable=nullable,
                primary_key=(
                    dc_field.name in declared_keys
                    or bool(dc_field.metadata.get(PRIMARY_KEY))
                ),
                zero=zero_value(semantic, nullable),
                has_default=has_default,
                init=dc_field.init,
            )
        )

    names = {f.name for f in fields}
    unknown = sorted(declared_keys - names)
    if unknown:
        raise SchemaError(
            f"{record_type.__name__} declares unknown primary key field(s) {unknown}"
        )

    table_name = record_type.__table_name__ or pascal_to_snake(record_type.__name__)

    return RecordDescriptor(
        record_type=record_type,
        table_name=table_name,
        fields=tuple(fields),
        primary_keys=tuple(f for f in fields if f.primary_key),
        _by_name={f.name: f for f in fields},
        _by_column={f.column: f for f in fields},
    )
