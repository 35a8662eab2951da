"""SQL literal encoding.

**SECURITY WARNING:**
    Literal-mode statements embed values directly in the SQL text. The only
    protection applied is doubling single quotes inside quoted literals. This
    is NOT a substitute for parameter binding: prefer
    ``StatementGenerator(parameterized=True)`` (or
    ``ConnectionConfig(parameterized=True)``) whenever values may come from
    untrusted input. The literal format is kept for compatibility with
    existing statements and logs.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from row_record.core.exceptions import UnsupportedLiteralError
from row_record.mapping.types import is_sentinel
from row_record.statements.dialect import ANSI, Dialect

EMPTY_LITERAL = "''"


def quote(text: str) -> str:
    """Wrap *text* in single quotes, doubling embedded quotes."""
    return "'" + text.replace("'", "''") + "'"


def encode_literal(value: Any, dialect: Dialect = ANSI) -> str:
    """Encode *value* as a SQL literal.

    - ``None`` and date/time sentinels encode as ``''``.
    - Other date/time values use the dialect's date-time format.
    - Binary values have no literal form and raise ``UnsupportedLiteralError``.
    - Everything else is stringified and quoted.
    """
    if value is None:
        return EMPTY_LITERAL
    if isinstance(value, (bytes, bytearray, memoryview)):
        raise UnsupportedLiteralError(value)
    if isinstance(value, date):
        if is_sentinel(value):
            return EMPTY_LITERAL
        return dialect.format_datetime(value)
    return quote(str(value))


def bind_value(value: Any) -> Any:
    """Value passed as a bound parameter; sentinels bind as NULL."""
    if is_sentinel(value):
        return None
    return value
