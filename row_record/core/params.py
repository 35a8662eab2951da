"""Placeholder conversion for bound-parameter statements.

The statement generator always writes ``:name`` placeholders. Drivers that
expect ``%(name)s`` get a rewritten copy of the statement; quoted literals
and ``::`` casts pass through unchanged.
"""

from __future__ import annotations

import re
from functools import lru_cache

# One scan over the statement: a quoted literal (with '' escapes) is matched
# whole and kept, a :name outside literals is captured for rewriting.
_TOKEN = re.compile(r"'(?:[^']|'')*'|(?<![:\w]):([A-Za-z_]\w*)")


def normalize_params(sql: str, paramstyle: str) -> str:
    """Rewrite ``:name`` placeholders for *paramstyle* ('named' or 'pyformat')."""
    if paramstyle == "named":
        return sql
    return _to_pyformat(sql)


def _replace(match: re.Match[str]) -> str:
    name = match.group(1)
    return match.group() if name is None else f"%({name})s"


@lru_cache(maxsize=256)
def _to_pyformat(sql: str) -> str:
    return _TOKEN.sub(_replace, sql)
