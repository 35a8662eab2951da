"""Unit tests for column/field name translation."""

from __future__ import annotations

import pytest

from row_record.core.naming import pascal_to_snake, snake_to_pascal


class TestPascalToSnake:
    def test_single_word(self) -> None:
        assert pascal_to_snake("Id") == "id"

    def test_multiple_words(self) -> None:
        assert pascal_to_snake("PaymentAmount") == "payment_amount"

    def test_digit_before_uppercase(self) -> None:
        assert pascal_to_snake("Address2Line") == "address2_line"

    def test_trailing_digit(self) -> None:
        assert pascal_to_snake("AddressLine2") == "address_line2"

    def test_class_name_to_table(self) -> None:
        assert pascal_to_snake("ArmmsLogTbl") == "armms_log_tbl"


class TestSnakeToPascal:
    def test_single_word(self) -> None:
        assert snake_to_pascal("id") == "Id"

    def test_multiple_words(self) -> None:
        assert snake_to_pascal("last_name") == "LastName"

    def test_digit_segment(self) -> None:
        assert snake_to_pascal("address_line2") == "AddressLine2"


@pytest.mark.parametrize(
    "field_name",
    ["Id", "LastName", "PaymentDate", "AddressLine2", "Address2Line", "X", "Tbl1Col"],
)
def test_round_trip_from_field(field_name: str) -> None:
    assert snake_to_pascal(pascal_to_snake(field_name)) == field_name


@pytest.mark.parametrize(
    "column",
    ["id", "last_name", "payment_date", "address_line2", "address2_line", "x"],
)
def test_round_trip_from_column(column: str) -> None:
    assert pascal_to_snake(snake_to_pascal(column)) == column
