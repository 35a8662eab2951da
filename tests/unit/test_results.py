"""Unit tests for ResultSet."""

from __future__ import annotations

from typing import Any

from row_record.core.results import ResultSet


class _Cursor:
    def __init__(self, description: Any, rows: list[Any]) -> None:
        self.description = description
        self._rows = rows

    def fetchall(self) -> list[Any]:
        return self._rows


class _AsyncCursor(_Cursor):
    async def fetchall(self) -> list[Any]:  # type: ignore[override]
        return self._rows


class TestResultSet:
    def test_positional_access(self) -> None:
        result = ResultSet(("id", "name"), [(1, "a"), (2, "b")])
        assert result.field_count == 2
        assert result.get_name(1) == "name"
        assert len(result) == 2
        assert list(result) == [(1, "a"), (2, "b")]

    def test_from_cursor(self) -> None:
        cursor = _Cursor((("id",), ("name",)), [(1, "a")])
        result = ResultSet.from_cursor(cursor)
        assert result.columns == ("id", "name")
        assert result.rows == [(1, "a")]

    def test_dict_rows_follow_column_order(self) -> None:
        cursor = _Cursor((("id",), ("name",)), [{"name": "a", "id": 1}])
        assert ResultSet.from_cursor(cursor).rows == [(1, "a")]

    def test_cursor_without_description(self) -> None:
        result = ResultSet.from_cursor(_Cursor(None, []))
        assert result.columns == ()
        assert len(result) == 0

    async def test_from_async_cursor(self) -> None:
        cursor = _AsyncCursor((("id",),), [(3,)])
        result = await ResultSet.from_async_cursor(cursor)
        assert result.rows == [(3,)]
