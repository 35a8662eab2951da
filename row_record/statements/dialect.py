"""SQL dialects: the product-specific parts of literal formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Dialect:
    """Literal formatting rules of one database product.

    Attributes:
        name: Dialect name, for diagnostics.
        datetime_template: ``str.format`` template receiving the date/time
            value as its single positional argument.
    """

    name: str
    datetime_template: str

    def format_datetime(self, value: date) -> str:
        return self.datetime_template.format(value)


ANSI = Dialect("ansi", "'{:%Y-%m-%d %H:%M:%S}'")

ORACLE = Dialect(
    "oracle",
    "to_date('{:%m/%d/%Y %I:%M:%S %p}','mm/dd/yyyy hh:mi:ss PM')",
)
