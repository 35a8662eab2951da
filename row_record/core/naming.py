"""Column and field name translation.

Columns are snake_case, record fields are PascalCase:
    LastName     <-> last_name
    AddressLine2 <-> address_line2
"""

from __future__ import annotations

import re
from functools import lru_cache

# Uppercase letter preceded by a lowercase letter or digit
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


@lru_cache(maxsize=1024)
def pascal_to_snake(name: str) -> str:
    """Convert a PascalCase field name to its snake_case column name."""
    return _WORD_BOUNDARY.sub("_", name).lower()


@lru_cache(maxsize=1024)
def snake_to_pascal(name: str) -> str:
    """Convert a snake_case column name to its PascalCase field name."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))
