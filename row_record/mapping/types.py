"""Semantic field types: zero values, sentinels and value coercion."""

from __future__ import annotations

import types
import typing
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

# Zero/epoch sentinels for temporal fields. A temporal field holding its
# sentinel is treated as "never set".
DATETIME_SENTINEL = datetime.min
DATE_SENTINEL = date.min

_ZERO_VALUES: dict[type, Any] = {
    str: "",
    int: 0,
    float: 0.0,
    Decimal: Decimal(0),
    bool: False,
    datetime: DATETIME_SENTINEL,
    date: DATE_SENTINEL,
    bytes: b"",
}

_TRUE_STRINGS = frozenset({"true", "1", "t", "y", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "f", "n", "no"})


def unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Return ``(inner_type, nullable)`` for ``X | None`` / ``Optional[X]``."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        nullable = len(args) < len(typing.get_args(annotation))
        if len(args) == 1:
            return args[0], nullable
        return Any, nullable
    return annotation, False


def is_temporal_type(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, date)


def is_sentinel(value: Any) -> bool:
    """True if *value* is the zero/epoch sentinel of its temporal type."""
    if isinstance(value, datetime):
        return value == DATETIME_SENTINEL
    if isinstance(value, date):
        return value == DATE_SENTINEL
    return False


def zero_value(tp: Any, nullable: bool = False) -> Any:
    """Default value for a field whose column was null or never set."""
    if nullable or tp is Any:
        return None
    if tp in _ZERO_VALUES:
        return _ZERO_VALUES[tp]
    try:
        return tp()
    except (TypeError, ValueError):
        return None


def type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


def coerce(value: Any, tp: Any) -> Any:
    """Convert a non-null SQL value to the semantic type *tp*.

    Raises:
        TypeError: If the value's family is not convertible to *tp*.
        ValueError: If the value is in a convertible family but malformed.
    """
    if tp is Any:
        return value
    if tp is bool:
        return _to_bool(value)
    if tp is int:
        return _to_int(value)
    if tp is float:
        if isinstance(value, (int, float, Decimal, str)):
            return float(value)
        raise TypeError("not a numeric value")
    if tp is Decimal:
        return _to_decimal(value)
    if tp is str:
        if isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("binary value cannot be read as text")
        return value if isinstance(value, str) else str(value)
    if tp is datetime:
        return _to_datetime(value)
    if tp is date:
        return _to_date(value)
    if tp is bytes:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError("not a binary value")
    if isinstance(tp, type) and isinstance(value, tp):
        return value
    return tp(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, Decimal)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"unrecognized boolean text {value!r}")
    raise TypeError("not a boolean value")


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        result = int(value)
        if result != value:
            raise ValueError("value has a fractional part")
        return result
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError("not an integer value")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal text {value!r}") from e
    raise TypeError("not a numeric value")


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        if not value.strip():
            return DATETIME_SENTINEL
        return datetime.fromisoformat(value.strip())
    raise TypeError("not a date/time value")


def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return DATE_SENTINEL
        return date.fromisoformat(value.strip()[:10])
    raise TypeError("not a date value")
