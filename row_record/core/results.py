"""Query results as seen by the mapping layer.

A ``ResultSet`` exposes the column names by position and the row values by
position, with ``None`` as the null marker.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


def _column_names(cursor: Any) -> tuple[str, ...]:
    if cursor.description is None:
        return ()
    return tuple(desc[0] for desc in cursor.description)


def _as_tuple(row: Any, columns: tuple[str, ...]) -> tuple[Any, ...]:
    # Dict-like rows (e.g. psycopg dict_row) are read back in column order
    if isinstance(row, dict):
        return tuple(row[column] for column in columns)
    return tuple(row)


@dataclass(frozen=True)
class ResultSet:
    """Materialized rows of one query execution."""

    columns: tuple[str, ...]
    rows: list[tuple[Any, ...]] = field(default_factory=list)

    @property
    def field_count(self) -> int:
        return len(self.columns)

    def get_name(self, index: int) -> str:
        return self.columns[index]

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @classmethod
    def from_cursor(cls, cursor: Any) -> ResultSet:
        """Read all rows from a DB-API cursor."""
        columns = _column_names(cursor)
        if not columns:
            return cls(columns)
        return cls(columns, [_as_tuple(row, columns) for row in cursor.fetchall()])

    @classmethod
    async def from_async_cursor(cls, cursor: Any) -> ResultSet:
        """Read all rows from an async cursor."""
        columns = _column_names(cursor)
        if not columns:
            return cls(columns)
        rows = await cursor.fetchall()
        return cls(columns, [_as_tuple(row, columns) for row in rows])
