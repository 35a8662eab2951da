"""Unit tests for SQL literal encoding."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from row_record.core.enums import ErrorKind
from row_record.core.exceptions import UnsupportedLiteralError
from row_record.mapping.types import DATE_SENTINEL, DATETIME_SENTINEL
from row_record.statements.dialect import ANSI, ORACLE
from row_record.statements.literals import bind_value, encode_literal, quote


class TestQuote:
    def test_plain(self) -> None:
        assert quote("Smith") == "'Smith'"

    def test_doubles_embedded_quotes(self) -> None:
        assert quote("O'Brien") == "'O''Brien'"

    def test_only_quote(self) -> None:
        assert quote("'") == "''''"


class TestEncodeLiteral:
    def test_none_is_empty_literal(self) -> None:
        assert encode_literal(None) == "''"

    def test_numbers_are_quoted(self) -> None:
        assert encode_literal(1) == "'1'"
        assert encode_literal(Decimal("10.50")) == "'10.50'"

    def test_bool_is_quoted_text(self) -> None:
        assert encode_literal(True) == "'True'"

    def test_datetime_sentinel_is_empty_literal(self) -> None:
        assert encode_literal(DATETIME_SENTINEL) == "''"
        assert encode_literal(DATE_SENTINEL, ORACLE) == "''"

    def test_ansi_datetime(self) -> None:
        assert encode_literal(datetime(2024, 3, 5, 14, 7, 9)) == "'2024-03-05 14:07:09'"

    def test_ansi_date(self) -> None:
        assert encode_literal(date(2024, 3, 5), ANSI) == "'2024-03-05 00:00:00'"

    def test_oracle_datetime(self) -> None:
        assert encode_literal(datetime(2024, 3, 5, 14, 7, 9), ORACLE) == (
            "to_date('03/05/2024 02:07:09 PM','mm/dd/yyyy hh:mi:ss PM')"
        )

    def test_bytes_rejected(self) -> None:
        with pytest.raises(UnsupportedLiteralError) as exc_info:
            encode_literal(b"\x00\x01")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_LITERAL
        assert "parameterized" in str(exc_info.value)


class TestBindValue:
    def test_sentinel_binds_null(self) -> None:
        assert bind_value(DATETIME_SENTINEL) is None

    def test_value_passthrough(self) -> None:
        assert bind_value("O'Brien") == "O'Brien"
