"""Unit tests for parameter normalizer."""

from __future__ import annotations

from row_record.core.params import normalize_params


class TestNormalizeParams:
    def test_named_passthrough(self) -> None:
        sql = "update person set last_name = :last_name where id = :key_id"
        assert normalize_params(sql, "named") == sql

    def test_pyformat_conversion(self) -> None:
        sql = "delete from person where id = :key_id"
        expected = "delete from person where id = %(key_id)s"
        assert normalize_params(sql, "pyformat") == expected

    def test_insert_values(self) -> None:
        sql = "insert into person (id, last_name) values (:id, :last_name)"
        expected = "insert into person (id, last_name) values (%(id)s, %(last_name)s)"
        assert normalize_params(sql, "pyformat") == expected

    def test_typecast_exclusion(self) -> None:
        sql = "select value::integer from t where id = :id"
        expected = "select value::integer from t where id = %(id)s"
        assert normalize_params(sql, "pyformat") == expected

    def test_string_literal_exclusion(self) -> None:
        sql = "select * from t where col = ':not_a_param' and id = :id"
        expected = "select * from t where col = ':not_a_param' and id = %(id)s"
        assert normalize_params(sql, "pyformat") == expected

    def test_doubled_quote_inside_literal(self) -> None:
        sql = "select * from t where col = 'O'':x' and id = :id"
        expected = "select * from t where col = 'O'':x' and id = %(id)s"
        assert normalize_params(sql, "pyformat") == expected

    def test_no_params(self) -> None:
        sql = "select 1"
        assert normalize_params(sql, "pyformat") == sql
