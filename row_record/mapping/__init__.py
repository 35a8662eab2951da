"""Mapping layer - record types, schema resolution and row mapping."""

from __future__ import annotations

from row_record.mapping.record import Record, key
from row_record.mapping.row import ColumnBinding, RowMapper
from row_record.mapping.schema import FieldSpec, RecordDescriptor, resolve
from row_record.mapping.types import DATE_SENTINEL, DATETIME_SENTINEL

__all__ = [
    "Record",
    "key",
    "FieldSpec",
    "RecordDescriptor",
    "resolve",
    "ColumnBinding",
    "RowMapper",
    "DATETIME_SENTINEL",
    "DATE_SENTINEL",
]
